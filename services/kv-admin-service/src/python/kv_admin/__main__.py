import logging
from typing import Optional
import uvicorn
from injector import Injector
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_injector import attach_injector
from prometheus_client import make_asgi_app
from kv_admin.backends import KvBackend, KvBackendFactory
from kv_admin.clients import ClientManager
from kv_admin.configs import KvAdminConfig
from kv_admin.controllers.cluster.v1 import router as cluster_management_controller_router
from kv_admin.controllers.kv.v1 import router as kv_management_controller_router
from request_handler import ApiResponse, RequestThreadPool

def build_app(config: KvAdminConfig, backend: Optional[KvBackend] = None) -> FastAPI:
    ##############################
    # Initialise API Thread Pool #
    ##############################

    RequestThreadPool.init(max_workers=config.server_max_threads)

    ##################################
    # Initialize Dependency Injector #
    ##################################

    actual_backend: KvBackend = backend or KvBackendFactory.create(config)

    def configure_bindings(binder):
        binder.bind(KvAdminConfig, to=config)
        binder.bind(KvBackend, to=actual_backend)

    injector: Injector = Injector([configure_bindings])

    ########################
    # Connect KV Clients   #
    ########################

    # A failed connect leaves the service up, clients can be set later via the cluster API
    client_manager: ClientManager = injector.get(ClientManager)
    client_manager.initialize()

    ######################
    # Initialize FastAPI #
    ######################

    # Initialize FastAPI
    fast_api: FastAPI = FastAPI(
        title="KV Admin API",
        description="API for administrating the keys of a TiKV cluster",
        version="1.0.0"
    )

    # Add CORS middleware
    fast_api.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers, cluster routes before the catch-all key routes
    fast_api.include_router(cluster_management_controller_router)
    fast_api.include_router(kv_management_controller_router)

    @fast_api.api_route("/health", methods=["GET", "HEAD"])
    async def health() -> JSONResponse:
        return JSONResponse(content=jsonable_encoder(ApiResponse(
            success=True,
            message="Service is healthy",
            data={"connected": client_manager.is_connected()}
        ), exclude_none=True))

    ################################
    # Initialize Prometheus Client #
    ################################

    # Create and mount Prometheus ASGI app
    prometheus_app = make_asgi_app()
    fast_api.mount("/metrics", prometheus_app)

    attach_injector(fast_api, injector)

    #############################
    # Graceful Shutdown Handler #
    #############################

    @fast_api.on_event("shutdown")
    async def shutdown_event():
        client_manager.close()

    return fast_api

def main():
    #####################
    # Configure Logging #
    #####################

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s: [%(name)s] %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%SZ',
        handlers=[logging.StreamHandler()]
    )

    ###############
    # Load Config #
    ###############

    config = KvAdminConfig()
    fast_api: FastAPI = build_app(config)

    ################
    # Start Server #
    ################

    # Start the server
    uvicorn.run(fast_api, host=config.server_host, port=config.server_port, access_log=False)
    RequestThreadPool.shutdown()

if __name__ == "__main__":
    main()
