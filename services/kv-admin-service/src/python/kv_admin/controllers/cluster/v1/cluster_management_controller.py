from fastapi import APIRouter, Request, Response
from fastapi_injector import Injected
from kv_admin.controllers.cluster.v1.handlers import GetClusterStatusHandler, UpdateClusterEndpointsHandler

router = APIRouter(prefix="/api/kv/cluster")

@router.get("")
async def get_cluster_status(request: Request, get_cluster_status_handler: GetClusterStatusHandler = Injected(GetClusterStatusHandler)) -> Response:
    return await get_cluster_status_handler.invoke(request)

@router.put("/endpoints")
async def update_cluster_endpoints(request: Request, update_cluster_endpoints_handler: UpdateClusterEndpointsHandler = Injected(UpdateClusterEndpointsHandler)) -> Response:
    return await update_cluster_endpoints_handler.invoke(request)
