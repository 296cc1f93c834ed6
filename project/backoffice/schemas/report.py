# backoffice/schemas/report.py

from typing import Dict, List
from backoffice.schemas.common import CamelModel

class VendorPerformance(CamelModel):
    vendor_id: int
    name: str
    orders: int
    revenue: str
    commission: str

class ReportSummary(CamelModel):
    total_products: int
    total_vendors: int
    total_customers: int
    total_orders: int
    orders_by_status: Dict[str, int]
    pending_percentage: float
    total_revenue: str
    vendor_performance: List[VendorPerformance]
