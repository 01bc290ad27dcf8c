from abc import ABC, abstractmethod

class URLBuilder(ABC):
    @abstractmethod
    def build_base_url(self, host: str, base_path: str) -> str:
        pass

    @staticmethod
    def _join(scheme: str, host: str, base_path: str) -> str:
        host = host.rstrip('/')
        base_path = '/' + base_path.strip('/') if base_path.strip('/') else ''
        return f"{scheme}://{host}{base_path}"

class HTTPURLBuilder(URLBuilder):
    def build_base_url(self, host: str, base_path: str) -> str:
        # http://api.aylien.com/api/v1
        return self._join("http", host, base_path)

class HTTPSURLBuilder(URLBuilder):
    def build_base_url(self, host: str, base_path: str) -> str:
        # https://api.aylien.com/api/v1
        return self._join("https", host, base_path)


def get_url_builder(use_https: bool) -> URLBuilder:
    if use_https:
        return HTTPSURLBuilder()
    return HTTPURLBuilder()
