"""選挙管理委員会レポートAPIクライアントパッケージ."""

from .client import REPORT_CODE, RinkejoPuslapisApiError, RinkejoPuslapisClient


__all__ = [
    "REPORT_CODE",
    "RinkejoPuslapisApiError",
    "RinkejoPuslapisClient",
]
