from enum import StrEnum

class OperationKind(StrEnum):
    PUT = "put"
    DELETE = "delete"
