"""Customer use cases: create, read, update, delete and list."""

from shopdesk.application.dto.requests import (
    CreateCustomerRequest,
    UpdateCustomerRequest,
)
from shopdesk.application.dto.responses import CustomerResponse, customer_to_response
from shopdesk.config import get_logger
from shopdesk.core.entities import Customer
from shopdesk.core.exceptions import CustomerNotFoundError, ValidationError
from shopdesk.core.interfaces import ICustomerStore, IInvoiceStore
from shopdesk.core.services.reporting import outstanding_balance

logger = get_logger(__name__)


class _CustomerUseCase:
    """Shared store wiring for customer use cases."""

    def __init__(
        self,
        customer_store: ICustomerStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._customer_store = customer_store
        self._invoice_store = invoice_store

    async def _get_customer_store(self) -> ICustomerStore:
        if self._customer_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_customer_store

            self._customer_store = await get_customer_store()
        return self._customer_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _require(self, customer_id: str) -> Customer:
        customer = await (await self._get_customer_store()).get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer


class CreateCustomerUseCase(_CustomerUseCase):
    async def execute(self, request: CreateCustomerRequest) -> Customer:
        name = request.name.strip()
        if not name:
            raise ValidationError("name", "name is required", request.name)
        customer = Customer(
            name=name,
            email=request.email.strip(),
            phone=request.phone.strip(),
            address=request.address.strip(),
        )
        return await (await self._get_customer_store()).create(customer)


class GetCustomerUseCase(_CustomerUseCase):
    """Customer detail with the balance still owed on their invoices."""

    async def execute(self, customer_id: str) -> CustomerResponse:
        customer = await self._require(customer_id)
        invoices = await (await self._get_invoice_store()).list_invoices(
            customer_id=customer_id, limit=None
        )
        return customer_to_response(customer, outstanding_balance(invoices))


class UpdateCustomerUseCase(_CustomerUseCase):
    async def execute(self, customer_id: str, request: UpdateCustomerRequest) -> Customer:
        customer = await self._require(customer_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes and not changes["name"].strip():
            raise ValidationError("name", "name is required", changes["name"])
        for field, value in changes.items():
            setattr(customer, field, value.strip())
        return await (await self._get_customer_store()).update(customer)


class DeleteCustomerUseCase(_CustomerUseCase):
    async def execute(self, customer_id: str) -> None:
        await self._require(customer_id)
        await (await self._get_customer_store()).delete(customer_id)


class ListCustomersUseCase(_CustomerUseCase):
    async def execute(
        self,
        search: str | None = None,
        sort_by: str = "name",
        descending: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> list[CustomerResponse]:
        store = await self._get_customer_store()
        customers = await store.list_customers(
            search=search,
            sort_by=sort_by,
            descending=descending,
            limit=limit,
            offset=offset,
        )
        return [customer_to_response(c) for c in customers]
