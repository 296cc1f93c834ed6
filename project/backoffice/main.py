# backoffice/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from dotenv import load_dotenv
from contextlib import asynccontextmanager

from backoffice.config import settings
from backoffice.utils.log import Log
from backoffice.services.storage import Store
from backoffice.services.profile import ensure_admin_user
from backoffice.services.whatsapp import WhatsAppClient
from backoffice.middleware.store_middleware import StoreMiddleware

# --- загрузка переменных окружения ---
load_dotenv()

# --- sync логгер для раннего старта ---
boot_log = Log()

# ────────────── Lifespan ──────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    boot_log.log_info_sync(target="startup", message="lifespan: startup начат")

    app.state.log = Log()

    # Хранилище живёт ровно столько, сколько процесс
    app.state.store = Store()
    admin = ensure_admin_user(app.state.store)
    if admin:
        await app.state.log.log_info("startup", "Создан первый администратор", {"username": admin.username})

    app.state.whatsapp = WhatsAppClient()
    await app.state.log.log_info("startup", "Хранилище и клиент WhatsApp инициализированы")

    yield

    # shutdown
    await app.state.log.log_info(target="shutdown", message="Остановка приложения")
    await app.state.log.shutdown()
    boot_log.log_info_sync(target="shutdown", message="Log корректно завершён")

# ────────────── Создаём FastAPI приложение ──────────────
app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# хранилище в request.state.store + таймаут запроса
app.add_middleware(StoreMiddleware)

@app.get("/")
def read_root():
    return {"message": "Vendor back-office API"}

# ────────────── Подключение роутов ──────────────
from backoffice.routes import auth, product, vendor, customer, order, whatsapp, report

api = settings.API_PREFIX
app.include_router(auth.router, prefix=api, tags=["auth"])
app.include_router(product.router, prefix=f"{api}/products", tags=["products"])
app.include_router(vendor.router, prefix=f"{api}/vendors", tags=["vendors"])
app.include_router(vendor.assignments_router, prefix=f"{api}/vendor-customers", tags=["vendors"])
app.include_router(customer.router, prefix=f"{api}/customers", tags=["customers"])
app.include_router(order.router, prefix=f"{api}/orders", tags=["orders"])
app.include_router(whatsapp.router, prefix=api, tags=["whatsapp"])
app.include_router(report.router, prefix=f"{api}/reports", tags=["reports"])

# ────────────── Запуск uvicorn ──────────────
if __name__ == "__main__":
    boot_log.log_info_sync(target="startup", message="Запуск uvicorn.run")
    uvicorn.run(
        "backoffice.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=True
    )
