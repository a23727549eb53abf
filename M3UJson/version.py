__title__ = 'M3UJson'
__version__ = '1.0.0'
__author__ = 'M3UJson contributors'
__description__ = 'Extract DASH stream URLs and ClearKey pairs from M3U playlists into JSON'
