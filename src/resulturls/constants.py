FRIENDLY_STYLE = "friendly"
STANDARD_STYLE = "standard"

GETFILE_ENDPOINT = "getfile.php"
GETGZIP_ENDPOINT = "getgzip.php"
RESPONSE_BODY_ENDPOINT = "response_body.php"
THUMBNAIL_ENDPOINT = "thumbnail.php"
RESULTS_ENDPOINT = "results.php"
VIDEO_CREATE_ENDPOINT = "video/create.php"
VIDEO_FRAMES_ENDPOINT = "video/downloadFrames.php"

GZIP_EXTENSION = ".gz"
THUMB_SUFFIX = "_thumb"
GENERATED_IMAGE_EXTENSION = ".png"
TEST_ID_SEPARATOR = "_"
TEST_ID_DATE_LENGTH = 6

DEFAULT_CONFIG_FILE = ".resulturls.yml"
