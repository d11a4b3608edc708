DEFAULT_KEY_PREFIX = "tikv_web_"
DEFAULT_ENDPOINTS = ["127.0.0.1:2379"]
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0
DEFAULT_SCAN_CAP = 10000
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
RAW_SWEEP_BATCH_SIZE = 1000
TXN_SWEEP_BATCH_SIZE = 200
TXN_ITER_BATCH_SIZE = 256
STATS_SAMPLE_LIMIT = 1000
API_VERSION = "v2"
