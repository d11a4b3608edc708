from enum import StrEnum

class KvMode(StrEnum):
    RAW = "rawkv"
    TXN = "txn"
