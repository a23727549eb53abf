# 19.10.26

import re
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple


# Internal utilities
from M3UJson.core.drm.codec import base64_to_hex, KeyDecodeError
from M3UJson.source.utils.object import (
    MAX_KEYS, DEFAULT_USER_AGENT, KeySlots, StreamRecord,
    DiagnosticKind, DiagnosticEvent, ExtractionResult
)


# Variable
logger = logging.getLogger(__name__)
BlockResult = Tuple[Optional[StreamRecord], List[DiagnosticEvent]]


class PlaylistExtractor:
    MARKER = "#EXTINF"
    TVG_ID = re.compile(r'tvg-id\s*=\s*"([^"]+)"')
    MPD_URL = re.compile(r'https?://\S+\.mpd')
    LICENSE_KEY = re.compile(r'"k"\s*:\s*"([^"]+)"\s*,\s*"kid"\s*:\s*"([^"]+)"')
    USER_AGENT = re.compile(r'#EXTVLCOPT:http-user-agent=(?:"([^"\n]+)"|([^"\n][^\n]*))')

    def __init__(self, default_user_agent: str = DEFAULT_USER_AGENT, max_workers: int = 1):
        """
        Split an M3U document into #EXTINF blocks and build one StreamRecord per channel.

        Parameters:
            default_user_agent (str): Used when a block has no #EXTVLCOPT:http-user-agent line.
            max_workers (int): Blocks are processed in a thread pool when greater than 1.
        """
        self.default_user_agent = default_user_agent or DEFAULT_USER_AGENT
        self.max_workers = max(1, int(max_workers or 1))

    @staticmethod
    def normalize(content: str) -> str:
        return content.replace("\r\n", "\n").replace("\r", "\n")

    def split_blocks(self, content: str) -> List[Tuple[int, str]]:
        """Return (index, block) pairs, empty fragments dropped."""
        sections = self.normalize(content).split(self.MARKER)
        return [(index, section) for index, section in enumerate(sections) if section]

    def extract(self, content: str) -> ExtractionResult:
        blocks = self.split_blocks(content)
        result = ExtractionResult(blocks=len(blocks))

        if self.max_workers > 1 and len(blocks) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                processed = list(executor.map(lambda item: self.process_block(*item), blocks))
        else:
            processed = [self.process_block(index, block) for index, block in blocks]

        # Apply in document order so a later duplicate always wins
        owners: Dict[str, int] = {}
        for (index, _), (record, events) in zip(blocks, processed):
            result.diagnostics.extend(events)
            if record is None:
                continue

            if record.identifier in owners:
                event = DiagnosticEvent(
                    DiagnosticKind.DUPLICATE_IDENTIFIER, index,
                    f"tvg-id '{record.identifier}' replaces the record from block {owners[record.identifier]}",
                    {'identifier': record.identifier, 'previous_block': owners[record.identifier]}
                )
                logger.debug(str(event))
                result.diagnostics.append(event)

            result.streams[record.identifier] = record
            owners[record.identifier] = index

        logger.info(f"Processed {result.blocks} block(s), extracted {len(result.streams)} stream(s)")
        return result

    def process_block(self, index: int, section: str) -> BlockResult:
        events: List[DiagnosticEvent] = []

        def emit(kind: DiagnosticKind, message: str, **context) -> None:
            event = DiagnosticEvent(kind, index, message, context)
            logger.debug(str(event))
            events.append(event)

        metadata_line = section.split("\n", 1)[0]
        tvg_id_match = self.TVG_ID.search(metadata_line)
        if not tvg_id_match:
            emit(DiagnosticKind.MISSING_IDENTIFIER, "No tvg-id found, block skipped", block=section)
            return None, events

        tvg_id = tvg_id_match.group(1)
        url_match = self.MPD_URL.search(section)
        if not url_match:
            emit(DiagnosticKind.MISSING_URL, f"No .mpd url found for tvg-id '{tvg_id}', block skipped", identifier=tvg_id, block=section)
            return None, events

        url = url_match.group(0)
        slots = KeySlots()

        for i, match in enumerate(self.LICENSE_KEY.finditer(section)):
            if i >= MAX_KEYS:
                break

            k_base64 = match.group(1).strip()
            kid_base64 = match.group(2).strip()

            try:
                kid_hex = self._decode(kid_base64)
            except KeyDecodeError as e:
                emit(DiagnosticKind.KEY_DECODE_FAILURE, f"Invalid kid for key{i + 1} of '{tvg_id}': {e.reason}", identifier=tvg_id, slot=i + 1, field='kid', value=kid_base64)
                continue

            try:
                k_hex = self._decode(k_base64)
            except KeyDecodeError as e:
                emit(DiagnosticKind.KEY_DECODE_FAILURE, f"Invalid k for key{i + 1} of '{tvg_id}': {e.reason}", identifier=tvg_id, slot=i + 1, field='k', value=k_base64)
                continue

            pair = slots.set(i, kid_hex, k_hex)
            emit(DiagnosticKind.KEY_EXTRACTED, f"key{i + 1} for '{tvg_id}': {pair}", identifier=tvg_id, slot=i + 1, key=pair)

        ua_match = self.USER_AGENT.search(section)
        if ua_match:
            user_agent = (ua_match.group(1) or ua_match.group(2)).strip()
        else:
            user_agent = self.default_user_agent

        record = StreamRecord.from_slots(tvg_id, url, slots, user_agent or self.default_user_agent)
        emit(DiagnosticKind.RECORD_CREATED, f"tvg-id '{tvg_id}' -> {url}", identifier=tvg_id, url=url, keys=len(slots))
        return record, events

    @staticmethod
    def _decode(value: str) -> str:
        if not value:
            raise KeyDecodeError(value, "empty value")
        return base64_to_hex(value)


def parse_m3u_content(content: str, **kwargs) -> ExtractionResult:
    """Extract streams and diagnostics from an M3U document."""
    return PlaylistExtractor(**kwargs).extract(content)


def extract(content: str, **kwargs) -> Dict[str, StreamRecord]:
    return parse_m3u_content(content, **kwargs).streams
