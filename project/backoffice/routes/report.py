# backoffice/routes/report.py

from fastapi import APIRouter, Request
from backoffice.schemas.report import ReportSummary
from backoffice.services.report import read_summary_service

router = APIRouter()


@router.get(
    "",
    response_model=ReportSummary,
    summary="Сводка для дашборда (путь страницы отчётов)",
)
@router.get(
    "/summary",
    response_model=ReportSummary,
    summary="Сводка для дашборда",
    response_description="Счётчики, заказы по статусам, выручка и комиссии продавцов",
)
async def read_summary(request: Request):
    try:
        return await read_summary_service(request)
    except Exception as e:
        await request.app.state.log.log_error("report", f"Ошибка при построении сводки: {str(e)}")
        raise
