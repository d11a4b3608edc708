import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

class RequestThreadPool:
    __thread_pool: Optional[ThreadPoolExecutor] = None

    @staticmethod
    def init(max_workers: int):
        previous = RequestThreadPool.__thread_pool
        RequestThreadPool.__thread_pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="api-request")
        if previous is not None:
            previous.shutdown(wait=False)

    @staticmethod
    def shutdown():
        if RequestThreadPool.__thread_pool is not None:
            RequestThreadPool.__thread_pool.shutdown(wait=True)
            RequestThreadPool.__thread_pool = None

    @staticmethod
    def run_async(func, *args, **kwargs):
        if not RequestThreadPool.__thread_pool:
            raise RuntimeError("RequestThreadPool not initialized. Call RequestThreadPool.init() first.")

        loop = asyncio.get_running_loop()
        return loop.run_in_executor(RequestThreadPool.__thread_pool, lambda: func(*args, **kwargs))
