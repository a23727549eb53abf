# 19.10.26

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List


# Variable
MAX_KEYS = 4
DEFAULT_USER_AGENT = "Mozilla/5.0 (Linux; Android 10; BRAVIA 4K VH2 Build/QTG3.200305.006.S292; wv)"
DEFAULT_RESOLUTION = "1280"


class KeySlots:
    """Fixed key1..key4 slots holding ``kid:key`` hex pairs, empty string when unset."""
    def __init__(self, size: int = MAX_KEYS):
        self._keys = [""] * size

    def set(self, index: int, kid: str, key: str) -> str:
        pair = f"{kid}:{key}"
        self._keys[index] = pair
        return pair

    def get_keys_list(self) -> List[str]:
        return [k for k in self._keys if k]

    def __len__(self):
        return len(self.get_keys_list())

    def __getitem__(self, index):
        return self._keys[index]


@dataclass(frozen=True)
class StreamRecord:
    """One channel of the output mapping."""
    identifier: str
    url: str
    key1: str = ""
    key2: str = ""
    key3: str = ""
    key4: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    authorization: str = ""
    proxy: str = ""
    shaka_packager: bool = False
    resolution: str = DEFAULT_RESOLUTION

    @classmethod
    def from_slots(cls, identifier: str, url: str, slots: KeySlots, user_agent: str) -> "StreamRecord":
        return cls(
            identifier=identifier,
            url=url,
            key1=slots[0],
            key2=slots[1],
            key3=slots[2],
            key4=slots[3],
            user_agent=user_agent
        )

    @property
    def keys(self) -> List[str]:
        return [k for k in (self.key1, self.key2, self.key3, self.key4) if k]

    def to_dict(self) -> Dict[str, Any]:
        """Serialized view; the identifier is the mapping key and key4 is dropped when empty."""
        data = {
            'url': self.url,
            'key1': self.key1,
            'key2': self.key2,
            'key3': self.key3,
            'key4': self.key4,
            'useragent': self.user_agent,
            'authorization': self.authorization,
            'proxy': self.proxy,
            'shaka-packager': self.shaka_packager,
            'resolution': self.resolution
        }
        if not self.key4:
            del data['key4']
        return data


class DiagnosticKind(Enum):
    MISSING_IDENTIFIER = "missing_identifier"
    MISSING_URL = "missing_url"
    KEY_DECODE_FAILURE = "key_decode_failure"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    RECORD_CREATED = "record_created"
    KEY_EXTRACTED = "key_extracted"

    @property
    def is_warning(self) -> bool:
        return self in (DiagnosticKind.MISSING_IDENTIFIER, DiagnosticKind.MISSING_URL, DiagnosticKind.KEY_DECODE_FAILURE)


@dataclass(frozen=True)
class DiagnosticEvent:
    kind: DiagnosticKind
    block_index: int
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_warning(self) -> bool:
        return self.kind.is_warning

    def __str__(self):
        return f"[block {self.block_index}] {self.message}"


@dataclass
class ExtractionResult:
    streams: Dict[str, StreamRecord] = field(default_factory=dict)
    diagnostics: List[DiagnosticEvent] = field(default_factory=list)
    blocks: int = 0

    @property
    def warnings(self) -> List[DiagnosticEvent]:
        return [d for d in self.diagnostics if d.is_warning]

    def by_kind(self, kind: DiagnosticKind) -> List[DiagnosticEvent]:
        return [d for d in self.diagnostics if d.kind is kind]
