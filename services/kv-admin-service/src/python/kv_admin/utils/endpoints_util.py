from managed_exceptions import InvalidArgumentException

class EndpointsUtil:

    @staticmethod
    def parse(endpoints_csv: str) -> list[str]:
        endpoints: list[str] = []
        for token in endpoints_csv.split(","):
            endpoint: str = token.strip()
            if not endpoint:
                continue
            if ":" not in endpoint:
                raise InvalidArgumentException(
                    f"Invalid endpoint format: {endpoint}. Expected host:port",
                    {"endpoint": endpoint}
                )
            endpoints.append(endpoint)

        if not endpoints:
            raise InvalidArgumentException("No valid endpoints provided")
        return endpoints

    @staticmethod
    def format(endpoints: list[str]) -> str:
        return ",".join(endpoints)
