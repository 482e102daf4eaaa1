"""
Schema definitions using Pandera for data validation.

Defines the tabular contract handed to presentation consumers.
"""

from techtrends.schemas.sales import SalesRecordSchema, records_to_frame

__all__ = ["SalesRecordSchema", "records_to_frame"]
