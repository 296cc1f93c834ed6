# backoffice/services/report.py

from collections import defaultdict
from decimal import Decimal
from fastapi import Request

from backoffice.models.order import Order, OrderStatus
from backoffice.models.vendor import Vendor
from backoffice.schemas.report import ReportSummary, VendorPerformance
from backoffice.services.storage import Store


def build_summary(store: Store) -> ReportSummary:
    """
    Сводка для дашборда.

    Выручка: сумма total по всем заказам, кроме отменённых.
    Комиссия продавца: его выручка, умноженная на vendor.commission.
    Заказы продавцов, которых уже нет, входят в общую выручку, но не в разбивку.
    """
    orders: list[Order] = store.get_orders()
    vendors: list[Vendor] = store.get_vendors()

    by_status = {s.value: 0 for s in OrderStatus}
    revenue_by_vendor: dict[int, Decimal] = defaultdict(Decimal)
    orders_by_vendor: dict[int, int] = defaultdict(int)
    total_revenue = Decimal("0")

    for order in orders:
        by_status[order.status.value] += 1
        orders_by_vendor[order.vendor_id] += 1
        if order.status is OrderStatus.CANCELLED:
            continue
        amount = Decimal(order.total)
        total_revenue += amount
        revenue_by_vendor[order.vendor_id] += amount

    performance = []
    for vendor in vendors:
        revenue = revenue_by_vendor.get(vendor.id, Decimal("0"))
        performance.append(VendorPerformance(
            vendor_id=vendor.id,
            name=vendor.name,
            orders=orders_by_vendor.get(vendor.id, 0),
            revenue=str(revenue),
            commission=str(revenue * Decimal(vendor.commission)),
        ))

    pending = by_status[OrderStatus.PENDING.value]
    return ReportSummary(
        total_products=len(store.get_products()),
        total_vendors=len(vendors),
        total_customers=len(store.get_customers()),
        total_orders=len(orders),
        orders_by_status=by_status,
        pending_percentage=(pending / len(orders) * 100) if orders else 0.0,
        total_revenue=str(total_revenue),
        vendor_performance=performance,
    )


async def read_summary_service(request: Request) -> ReportSummary:
    store: Store = request.state.store
    log = request.app.state.log

    summary = build_summary(store)
    await log.log_info("report", "Сводка построена", {
        "orders": summary.total_orders, "revenue": summary.total_revenue,
    })
    return summary
