import logging
import os
import yaml
from pathlib import Path
from typing import Optional
from injector import singleton
from kv_admin.constants import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_ENDPOINTS, DEFAULT_KEY_PREFIX, DEFAULT_SCAN_CAP, STATS_SAMPLE_LIMIT
from kv_admin.utils import EndpointsUtil

SUPPORTED_DRIVERS = ("tikv", "rocksdb", "memory")

@singleton
class KvAdminConfig:

    def __init__(self, config_path: Optional[str] = None):
        self.__logger = logging.getLogger(self.__class__.__name__)

        # Resolve config file path
        # From: services/kv-admin-service/src/python/kv_admin/configs/kv_admin_config.py
        # To:   services/kv-admin-service/src/resources/configs/default.yaml
        actual_config_path = Path(
            config_path
            or os.environ.get("KV_ADMIN_CONFIG_FILE")
            or Path(__file__).resolve().parents[3] / "resources" / "configs" / "default.yaml"
        )
        if not actual_config_path.exists():
            raise FileNotFoundError(f"Config file not found at: {actual_config_path}")

        with open(actual_config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        kv_admin_config = raw_config.get("kv_admin", {})

        # Server settings
        server_config = kv_admin_config.get("server", {})
        self.server_host: str = server_config.get("host", "0.0.0.0")
        self.server_port: int = int(server_config.get("port", 3001))
        self.server_max_threads: int = int(server_config.get("max_threads", 32))

        # Cluster settings
        cluster_config = kv_admin_config.get("cluster", {})
        endpoints = os.environ.get("TIKV_PD_ENDPOINTS") or cluster_config.get("endpoints", DEFAULT_ENDPOINTS)
        if isinstance(endpoints, list):
            endpoints = EndpointsUtil.format([str(endpoint) for endpoint in endpoints])
        self.cluster_endpoints: list[str] = EndpointsUtil.parse(endpoints)
        self.cluster_connect_timeout_seconds: float = float(cluster_config.get("connect_timeout_seconds", DEFAULT_CONNECT_TIMEOUT_SECONDS))

        # Backend settings
        backend_config = kv_admin_config.get("backend", {})
        self.backend_driver: str = os.environ.get("KV_ADMIN_BACKEND_DRIVER") or backend_config.get("driver", "tikv")
        if self.backend_driver not in SUPPORTED_DRIVERS:
            raise ValueError(f"Unsupported backend driver: {self.backend_driver}. Expected one of {SUPPORTED_DRIVERS}")
        rocksdb_config = backend_config.get("rocksdb", {})
        self.rocksdb_data_dir: str = rocksdb_config.get("data_dir", "./.database")
        self.rocksdb_create_if_missing: bool = bool(rocksdb_config.get("create_if_missing", True))

        # Key settings
        keys_config = kv_admin_config.get("keys", {})
        self.keys_namespace_prefix: str = keys_config.get("namespace_prefix", DEFAULT_KEY_PREFIX)

        # Scan settings
        scan_config = kv_admin_config.get("scan", {})
        self.scan_max_scan_keys: int = int(scan_config.get("max_scan_keys", DEFAULT_SCAN_CAP))

        # Stats settings
        stats_config = kv_admin_config.get("stats", {})
        self.stats_sample_limit: int = int(stats_config.get("sample_limit", STATS_SAMPLE_LIMIT))

        self.__logger.info(f"KvAdminConfig loaded from {actual_config_path}")
