from .zoneinfo_date_provider import ZoneInfoDateProvider

__all__ = ["ZoneInfoDateProvider"]
