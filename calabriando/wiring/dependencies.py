from functools import lru_cache
import logging

from fastapi import Depends

from calabriando.core.config import settings
from calabriando.application.ports.backend import BackendPort
from calabriando.application.ports.notifications import NotificationPort
from calabriando.application.ports.payments import PaymentPort
from calabriando.application.ports.receipts import ReceiptRendererPort
from calabriando.application.use_cases.book_item import BookItemUseCase
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.application.use_cases.federated_search import FederatedSearchUseCase
from calabriando.application.use_cases.get_booking import GetBookingUseCase
from calabriando.application.use_cases.load_site_content import LoadSiteContentUseCase
from calabriando.application.use_cases.payments import (
    ConfirmPaymentUseCase,
    StartCheckoutUseCase,
    VerifyPayPalPaymentUseCase,
)
from calabriando.infrastructure.notifications.email_function import EdgeFunctionNotifier
from calabriando.infrastructure.notifications.mock_notifier import MockNotifier
from calabriando.infrastructure.payments.mock_payments import MockPaymentGateway
from calabriando.infrastructure.payments.edge_functions import EdgeFunctionPaymentGateway
from calabriando.infrastructure.receipts.pdf_receipt import ReportlabReceiptRenderer
from calabriando.infrastructure.store.memory_backend import MemoryBackend
from calabriando.infrastructure.store.seed_data import SEED_TABLES
from calabriando.infrastructure.supabase.functions_client import SupabaseFunctionsClient
from calabriando.infrastructure.supabase.rest_client import SupabaseRestClient
from calabriando.infrastructure.supabase.supabase_backend import SupabaseBackend


logger = logging.getLogger(__name__)

_backend: SupabaseBackend | MemoryBackend | None = None


def _supabase_configured() -> bool:
    return bool(settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY)


def get_backend() -> BackendPort:
    global _backend
    if _backend is None:
        if _supabase_configured():
            logger.info("Using Supabase backend")
            _backend = SupabaseBackend(
                SupabaseRestClient(
                    base_url=settings.SUPABASE_URL,
                    api_key=settings.SUPABASE_ANON_KEY,
                    timeout=settings.HTTP_TIMEOUT_SECONDS,
                )
            )
        elif settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MemoryBackend (Supabase not configured, ENV=dev/local)")
            _backend = MemoryBackend(SEED_TABLES)
        else:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required outside dev/local.")
    return _backend


@lru_cache
def get_functions_client() -> SupabaseFunctionsClient:
    return SupabaseFunctionsClient(
        base_url=settings.SUPABASE_URL,
        api_key=settings.SUPABASE_ANON_KEY,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


@lru_cache
def get_notifier() -> NotificationPort:
    if not _supabase_configured():
        return MockNotifier()
    return EdgeFunctionNotifier(client=get_functions_client())


@lru_cache
def get_payments() -> PaymentPort:
    backend = get_backend()
    if isinstance(backend, MemoryBackend):
        return MockPaymentGateway(backend=backend)
    return EdgeFunctionPaymentGateway(client=get_functions_client())


@lru_cache
def get_receipt_renderer() -> ReceiptRendererPort:
    return ReportlabReceiptRenderer(business_name=settings.BUSINESS_NAME)


def get_catalog_use_case(backend: BackendPort = Depends(get_backend)) -> CatalogUseCase:
    return CatalogUseCase(backend=backend)


def get_book_item_use_case(
    backend: BackendPort = Depends(get_backend),
    catalog: CatalogUseCase = Depends(get_catalog_use_case),
    notifier: NotificationPort = Depends(get_notifier),
    receipts: ReceiptRendererPort = Depends(get_receipt_renderer),
) -> BookItemUseCase:
    return BookItemUseCase(
        backend=backend,
        catalog=catalog,
        notifier=notifier,
        receipts=receipts,
        email_enabled=settings.EMAIL_NOTIFICATIONS_ENABLED,
    )


def get_booking_lookup_use_case(
    backend: BackendPort = Depends(get_backend),
    catalog: CatalogUseCase = Depends(get_catalog_use_case),
    receipts: ReceiptRendererPort = Depends(get_receipt_renderer),
) -> GetBookingUseCase:
    return GetBookingUseCase(backend=backend, catalog=catalog, receipts=receipts)


def get_site_content_use_case(backend: BackendPort = Depends(get_backend)) -> LoadSiteContentUseCase:
    return LoadSiteContentUseCase(backend=backend, delays=settings.CONTENT_RETRY_DELAYS)


def get_search_use_case(backend: BackendPort = Depends(get_backend)) -> FederatedSearchUseCase:
    return FederatedSearchUseCase(backend=backend, limit_per_table=settings.SEARCH_LIMIT_PER_TABLE)


def get_start_checkout_use_case(
    payments: PaymentPort = Depends(get_payments),
    bookings: GetBookingUseCase = Depends(get_booking_lookup_use_case),
) -> StartCheckoutUseCase:
    return StartCheckoutUseCase(payments=payments, bookings=bookings, site_url=settings.PUBLIC_SITE_URL)


def get_confirm_payment_use_case(payments: PaymentPort = Depends(get_payments)) -> ConfirmPaymentUseCase:
    return ConfirmPaymentUseCase(payments=payments)


def get_paypal_use_case(
    payments: PaymentPort = Depends(get_payments),
    bookings: GetBookingUseCase = Depends(get_booking_lookup_use_case),
) -> VerifyPayPalPaymentUseCase:
    return VerifyPayPalPaymentUseCase(payments=payments, bookings=bookings)
