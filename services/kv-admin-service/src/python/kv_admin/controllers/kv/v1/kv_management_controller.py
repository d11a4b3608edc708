from fastapi import APIRouter, Request, Response
from fastapi_injector import Injected
from kv_admin.controllers.kv.v1.handlers import CreateKeyHandler, DeleteAllKeysHandler, DeleteKeyHandler, DeleteKeysHandler, ExecuteBatchHandler, ExecuteTransactionHandler, GetKeyHandler, GetStatsHandler, ScanKeysHandler, UpdateKeyHandler

router = APIRouter(prefix="/api/kv")

@router.get("")
async def scan_keys(request: Request, scan_keys_handler: ScanKeysHandler = Injected(ScanKeysHandler)) -> Response:
    return await scan_keys_handler.invoke(request)

@router.post("")
async def create_key(request: Request, create_key_handler: CreateKeyHandler = Injected(CreateKeyHandler)) -> Response:
    return await create_key_handler.invoke(request)

@router.put("")
async def update_key(request: Request, update_key_handler: UpdateKeyHandler = Injected(UpdateKeyHandler)) -> Response:
    return await update_key_handler.invoke(request)

@router.delete("")
async def delete_keys(request: Request, delete_keys_handler: DeleteKeysHandler = Injected(DeleteKeysHandler)) -> Response:
    return await delete_keys_handler.invoke(request)

@router.post("/batch")
async def execute_batch(request: Request, execute_batch_handler: ExecuteBatchHandler = Injected(ExecuteBatchHandler)) -> Response:
    return await execute_batch_handler.invoke(request)

@router.post("/transaction")
async def execute_transaction(request: Request, execute_transaction_handler: ExecuteTransactionHandler = Injected(ExecuteTransactionHandler)) -> Response:
    return await execute_transaction_handler.invoke(request)

@router.delete("/all")
async def delete_all_keys(request: Request, delete_all_keys_handler: DeleteAllKeysHandler = Injected(DeleteAllKeysHandler)) -> Response:
    return await delete_all_keys_handler.invoke(request)

@router.get("/stats")
async def get_stats(request: Request, get_stats_handler: GetStatsHandler = Injected(GetStatsHandler)) -> Response:
    return await get_stats_handler.invoke(request)

# Keys may contain slashes, so the single-key routes are registered last

@router.get("/{key:path}")
async def get_key(request: Request, get_key_handler: GetKeyHandler = Injected(GetKeyHandler)) -> Response:
    return await get_key_handler.invoke(request)

@router.delete("/{key:path}")
async def delete_key(request: Request, delete_key_handler: DeleteKeyHandler = Injected(DeleteKeyHandler)) -> Response:
    return await delete_key_handler.invoke(request)
