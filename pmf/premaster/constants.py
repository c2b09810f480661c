# Constants
PREMASTER_EXTENSION = ".pmf"
DESCRIPTOR_EXTENSION = ".ff"
BIN_EXTENSION = ".bin"
CUE_EXTENSION = ".cue"

AUDIO_MSB = "AUDIO_MSB"
AUDIO_LSB = "AUDIO_LSB"

CUE_TRACK_TYPE_AUDIO = "AUDIO"
CUE_TRACK_TYPE_MODE2 = "MODE2/2352"

# Regular expressions
REGEX_AUDIO_BYTE_ORDER = r'^AUDIO_BYTE_ORDER:\s*(?P<order>\S*)'
REGEX_NUMBER_OF_TRACKS = r'^%NUMBER_OF_ADDED_TRACKS\b\s*(?P<count>[+-]?\d+)?'
REGEX_START_OF_TRACKS = r'^%START_OF_ADDED_TRACK_DATA\b'
REGEX_TRACK = r'^(?P<num>[+-]?\d+)\s+(?P<mode>[+-]?\d+)\s+(?P<start>[+-]?\d+)\s+(?P<end>[+-]?\d+)'
