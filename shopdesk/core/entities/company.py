"""Company settings entity (singleton document)."""

from pydantic import BaseModel, Field


class CompanySettings(BaseModel):
    """Seller details printed on invoices."""

    name: str = "My Shop"
    owner: str = ""
    logo: str = ""  # local image path
    address: str = ""
    city: str = ""
    country: str = "India"
    email: str = ""
    phone: str = ""
    tax_rate: float = Field(5.0, ge=0, le=100)  # percent, prices include it
    gstin: str = ""
    payment_terms: str = "Immediate"
    notes: str = "Thank you for your business."
    signature: str = ""  # local image path

    @property
    def tax_fraction(self) -> float:
        return self.tax_rate / 100
