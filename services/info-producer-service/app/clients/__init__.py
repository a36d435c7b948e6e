from .coordinator import CoordinatorClient
from .http_utils import close_http_clients, get_http_client, put_json

__all__ = ["CoordinatorClient", "close_http_clients", "get_http_client", "put_json"]
