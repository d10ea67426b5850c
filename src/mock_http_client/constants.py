#################################################################################
# Wire format
# Values used when writing and reading recorded responses.

CRLF = "\r\n"

# HEAD_BODY_SEPARATOR marks the end of the status line + headers block
HEAD_BODY_SEPARATOR = b"\r\n\r\n"

# RECORDED_HTTP_VERSION is written on the status line of every recording
RECORDED_HTTP_VERSION = "HTTP/1.1"

# RECORDING_FILE_EXTENSION is appended to the request fingerprint to give the recording file name
RECORDING_FILE_EXTENSION = ".http"

#################################################################################
# Configuration defaults

DEFAULT_RECORDING_DIR = "./.mock_responses"

# MODE_REPLAY only ever reads recordings, a missing recording is a transport error
MODE_REPLAY = "replay"

# MODE_RECORD replays recordings when present and forwards + records otherwise
MODE_RECORD = "record"

ALLOWED_MODES = [MODE_REPLAY, MODE_RECORD]

# MODE_PATTERN validates a configured mode against ALLOWED_MODES
MODE_PATTERN = "^(" + "|".join(ALLOWED_MODES) + ")$"
