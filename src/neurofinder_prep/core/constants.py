NEUROFINDER_BASE_URL = "https://s3.amazonaws.com/neuro.datasets/challenges/neurofinder"
ARCHIVE_NAME = "neurofinder.{dataset_id}.zip"

DEFAULT_DATASETS_DIR = "public/datasets"
DEFAULT_URL_PREFIX = "datasets"  # frame paths are relative to the static site root
DEFAULT_MAX_FRAMES = 100
DOWNLOAD_CHUNK_BYTES = 1024 * 1024

# Known Neurofinder challenge datasets
DATASETS = (
    "00.00", "00.01", "00.02", "00.03", "00.04", "00.05",
    "00.06", "00.07", "00.08", "00.09", "00.10", "00.11",
    "01.00", "01.01", "02.00", "02.01", "03.00", "04.00", "04.01",
)

IMAGE_EXTENSIONS = (".tif", ".tiff")

# Archives differ in internal layout; probed in order, relative to <id>/
LAYOUT_ROOTS = ("", "neurofinder/{dataset_id}", "neurofinder.{dataset_id}")
IMAGES_SUBDIR = "images"
REGIONS_FILE = "regions/regions.json"

# Environment overrides
ENV_DATASETS_DIR = "NEUROFINDER_DATASETS_DIR"
ENV_PUBLISH_DIR = "NEUROFINDER_PUBLISH_DIR"
ENV_BASE_URL = "NEUROFINDER_BASE_URL"
ENV_URL_PREFIX = "NEUROFINDER_URL_PREFIX"
ENV_HTTP_TIMEOUT = "NEUROFINDER_HTTP_TIMEOUT"
ENV_LOG_LEVEL = "NEUROFINDER_LOG_LEVEL"
