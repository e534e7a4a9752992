# External tools
FFMPEG_BINARY = "ffmpeg"
FFPROBE_BINARY = "ffprobe"

# Default settings
DEFAULT_NUM_SCREENSHOTS = 3
DEFAULT_SNAPSHOT_PREFIX = "snapshot"
DEFAULT_IMAGE_FORMAT = "png"
DEFAULT_PACING_DELAY = 1.0
DEFAULT_LOG_LEVEL = "INFO"

# Sampling window, as percent of the total duration
SAMPLING_WINDOW_START_PERCENT = 5
SAMPLING_WINDOW_END_PERCENT = 35

# Decoder settings
SNAPSHOT_PIXEL_FORMAT = "rgb24"
SCALE_FILTER_TEMPLATE = (
    "scale='max(sar,1)*iw':'max(1/sar,1)*ih'"
    ":in_h_chr_pos=0:in_v_chr_pos=128"
    ":in_color_matrix={color_matrix}"
    ":flags=full_chroma_int+full_chroma_inp+accurate_rnd+spline"
)

# Probe color tags, checked in order
COLOR_TAGS = [
    ("bt709", "bt709"),
    ("smpte170m", "bt601"),
    ("bt2020", "bt2020"),
]

# Environment variables
ENV_FFMPEG = "TAKE_SNAPSHOTS_FFMPEG"
ENV_FFPROBE = "TAKE_SNAPSHOTS_FFPROBE"
ENV_DELAY = "TAKE_SNAPSHOTS_DELAY"
ENV_LOG_DIR = "TAKE_SNAPSHOTS_LOG_DIR"
ENV_LOG_LEVEL = "LOG_LEVEL"
