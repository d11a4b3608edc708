import json
import logging
from abc import ABC, abstractmethod
from http import HTTPStatus
from time import time
from typing import Any, Generic, TypeVar, get_args
from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from managed_exceptions import ManagedException, InternalErrorException, InvalidArgumentException
from pydantic import TypeAdapter, ValidationError
from prometheus_client import Counter, Histogram, Gauge
from .api_response import ApiResponse
from .request_thread_pool import RequestThreadPool

CONCURRENT_REQUESTS = Gauge("kva_api_exe_concurrent", "Number of concurrent API requests being processed", ["handler"])
REQUEST_COUNTER = Counter("kva_api_exe_total", "Total number of API requests executed", ["handler"])
REQUEST_HISTOGRAM = Histogram("kva_api_exe_duration_seconds", "Duration of API requests in seconds", ["handler"])
RESPONSE_ERROR_COUNTER = Counter("kva_api_exe_error_total", "Total number of API requests that resulted in error", ["handler", "status_code"])

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")

class RequestHandler(ABC, Generic[TRequest, TResponse]):
    """Base class of every API handler.

    The request model is assembled from the query string, the path parameters
    and the JSON body (in that order of precedence, last wins), validated with
    pydantic, and handed to ``_on_validate``/``_on_invoke`` on the request
    thread pool. Results and errors are wrapped in an ``ApiResponse`` envelope.
    """

    def __init__(self, success_message: str = "Request completed successfully", success_status: HTTPStatus = HTTPStatus.OK):
        self.__logger = logging.getLogger(self.__class__.__name__)
        base_type = self.__class__.__orig_bases__[0] # type: ignore
        generics = get_args(base_type)
        request_class = generics[0]
        self.__request_type_adapter = TypeAdapter(request_class)
        self.__success_message = success_message
        self.__success_status = success_status

    async def invoke(self, request: Request) -> Response:
        start_time: float = time()
        REQUEST_COUNTER.labels(handler=self.__class__.__name__).inc()
        CONCURRENT_REQUESTS.labels(handler=self.__class__.__name__).inc()
        try:
            # Parse request
            actual_request: TRequest = await self.__read_request(request)
            # Invoke request
            self.__logger.info(f"Full Request: <{actual_request}>")
            actual_ok_response: TResponse = await RequestThreadPool.run_async(lambda: self.__invoke_sync(actual_request))
            # Return OK response
            self.__logger.info(f"Full Response: <{self.__success_status} | {actual_ok_response}>")
            return self.__get_response(self.__success_status, ApiResponse(
                success=True,
                message=self.__success_message,
                data=actual_ok_response
            ))
        except ManagedException as e:
            # Return error response
            actual_error_response: ApiResponse = self.__get_error_response(e)
            self.__logger.info(f"Full Response: <{e.status_code} | {actual_error_response}>")
            RESPONSE_ERROR_COUNTER.labels(handler=self.__class__.__name__, status_code=e.status_code).inc()
            return self.__get_response(e.status_code, actual_error_response)
        except Exception as e:
            # Return error response
            actual_error_response: ApiResponse = self.__get_error_response(e)
            self.__logger.info(f"Full Response: <{HTTPStatus.INTERNAL_SERVER_ERROR} | {actual_error_response}>", exc_info=True)
            RESPONSE_ERROR_COUNTER.labels(handler=self.__class__.__name__, status_code=HTTPStatus.INTERNAL_SERVER_ERROR).inc()
            return self.__get_response(HTTPStatus.INTERNAL_SERVER_ERROR, actual_error_response)
        finally:
            duration: float = time() - start_time
            REQUEST_HISTOGRAM.labels(handler=self.__class__.__name__).observe(duration)
            CONCURRENT_REQUESTS.labels(handler=self.__class__.__name__).dec()

    def __invoke_sync(self, request: TRequest) -> TResponse:
        # Validate request
        self._on_validate(request)
        # Invoke handler
        return self._on_invoke(request)

    @abstractmethod
    def _on_validate(self, request: TRequest) -> None:
        pass

    @abstractmethod
    def _on_invoke(self, request: TRequest) -> TResponse:
        pass

    async def __read_request(self, request: Request) -> TRequest:
        payload: dict[str, Any] = dict(request.query_params)
        payload.update(request.path_params)
        body: bytes = await request.body()
        try:
            if body.strip():
                decoded = json.loads(body)
                if not isinstance(decoded, dict):
                    raise InvalidArgumentException("Request body must be a JSON object")
                payload.update(decoded)
            return self.__request_type_adapter.validate_python(payload)
        except ValidationError as e:
            raise InvalidArgumentException("Invalid request parameters", {
                ".".join(str(part) for part in error["loc"]) or "request": error["msg"]
                for error in e.errors()
            }) from e
        except ValueError as e:
            raise InvalidArgumentException("Invalid request body") from e

    def __get_error_response(self, exception: Exception) -> ApiResponse:
        if isinstance(exception, ManagedException):
            managed_exception = exception
            error = exception.cause_message
        else:
            managed_exception = InternalErrorException("An unexpected error occurred")
            error = str(exception)

        return ApiResponse(
            success=False,
            message=str(managed_exception),
            error=error,
            diagnostic_code=managed_exception.diagnostic_code,
            diagnostic_details=managed_exception.diagnostic_details
        )

    def __get_response(self, status_code: HTTPStatus, content: ApiResponse) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=jsonable_encoder(content, exclude_none=True)
        )
