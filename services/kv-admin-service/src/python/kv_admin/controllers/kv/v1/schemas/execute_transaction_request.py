from pydantic import BaseModel
from .transaction_operation import TransactionOperation

class ExecuteTransactionRequest(BaseModel):
    operations: list[TransactionOperation] = []
