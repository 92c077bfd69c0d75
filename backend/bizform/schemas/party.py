"""往来方主数据 Schema"""
from datetime import date

from bizform.schemas.common import CamelModel, FlexibleDate, RecordResponse


class CompanyBase(CamelModel):
    company_name: str
    contact_person: str
    address: str
    phone_number: str
    iec_number: str
    gst_number: str


class CompanyCreate(CompanyBase):
    pass


class CompanyResponse(CompanyBase, RecordResponse):
    pass


class BankBase(CamelModel):
    bank_name: str
    bank_address: str
    account_number: str
    swift_code: str
    ifsc_code: str


class BankCreate(BankBase):
    pass


class BankResponse(BankBase, RecordResponse):
    pass


class ClientBase(CamelModel):
    company_name: str
    person: str
    contact_number: str
    address: str
    city: str
    country: str
    pin_code: str


class ClientCreate(ClientBase):
    pass


class ClientResponse(ClientBase, RecordResponse):
    pass


class ManufacturerBase(CamelModel):
    company_name: str
    contact_person: str
    address: str
    gst_number: str
    stuffing_permission_number: str
    pin_code: str


class ManufacturerCreate(ManufacturerBase):
    stuffing_permission_date: FlexibleDate


class ManufacturerResponse(ManufacturerBase, RecordResponse):
    stuffing_permission_date: date


class ContactPartyBase(CamelModel):
    """供应商 / 运输商 / 托盘供应商"""
    company_name: str
    gst_number: str
    contact_person: str
    contact_number: str


class ContactPartyCreate(ContactPartyBase):
    pass


class ContactPartyResponse(ContactPartyBase, RecordResponse):
    pass


SupplierCreate = TransporterCreate = PalletCreate = ContactPartyCreate
SupplierResponse = TransporterResponse = PalletResponse = ContactPartyResponse
