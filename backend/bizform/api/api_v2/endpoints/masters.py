"""主数据接口：出口商、银行、客户、工厂、供应商、运输商、托盘供应商、规格"""

from bizform import crud
from bizform.api.api_v2.endpoints.resource import ResourceSpec, build_resource_router
from bizform.schemas.catalog import SizeCreate, SizeResponse
from bizform.schemas.party import (
    BankCreate, BankResponse, ClientCreate, ClientResponse, CompanyCreate, CompanyResponse,
    ContactPartyCreate, ContactPartyResponse, ManufacturerCreate, ManufacturerResponse,
)

CONTACT_PARTY_FIELDS = ("companyName", "gstNumber", "contactPerson", "contactNumber")

exporter_spec = ResourceSpec(
    crud=crud.company,
    create_schema=CompanyCreate,
    response_schema=CompanyResponse,
    label="Exporter",
    id_label="Company",
    singular="exporter",
    plural="exporters",
    required=("companyName", "contactPerson", "address", "phoneNumber", "iecNumber", "gstNumber"),
)

bank_spec = ResourceSpec(
    crud=crud.bank,
    create_schema=BankCreate,
    response_schema=BankResponse,
    label="Bank",
    singular="bank",
    plural="banks",
    required=("bankName", "bankAddress", "accountNumber", "swiftCode", "ifscCode"),
)

client_spec = ResourceSpec(
    crud=crud.client,
    create_schema=ClientCreate,
    response_schema=ClientResponse,
    label="Client",
    singular="client",
    plural="clients",
    required=("companyName", "person", "contactNumber", "address", "city", "country", "pinCode"),
)

manufacturer_spec = ResourceSpec(
    crud=crud.manufacturer,
    create_schema=ManufacturerCreate,
    response_schema=ManufacturerResponse,
    label="Manufacturer",
    singular="manufacturer",
    plural="manufacturers",
    required=(
        "companyName", "contactPerson", "address", "gstNumber",
        "stuffingPermissionNumber", "stuffingPermissionDate", "pinCode",
    ),
)

supplier_spec = ResourceSpec(
    crud=crud.supplier,
    create_schema=ContactPartyCreate,
    response_schema=ContactPartyResponse,
    label="Supplier",
    singular="supplier",
    plural="suppliers",
    required=CONTACT_PARTY_FIELDS,
)

transporter_spec = ResourceSpec(
    crud=crud.transporter,
    create_schema=ContactPartyCreate,
    response_schema=ContactPartyResponse,
    label="Transporter",
    singular="transporter",
    plural="transporters",
    required=CONTACT_PARTY_FIELDS,
)

pallet_spec = ResourceSpec(
    crud=crud.pallet,
    create_schema=ContactPartyCreate,
    response_schema=ContactPartyResponse,
    label="Pallet supplier",
    singular="pallet supplier",
    plural="pallets",
    required=CONTACT_PARTY_FIELDS,
)

size_spec = ResourceSpec(
    crud=crud.size,
    create_schema=SizeCreate,
    response_schema=SizeResponse,
    label="Size",
    singular="size",
    plural="sizes",
    required=("size", "sqmPerBox", "boxWeight", "purchasePrice", "salesPrice", "hsnCode", "palletDetails"),
)

exporter_router = build_resource_router(exporter_spec)
bank_router = build_resource_router(bank_spec)
client_router = build_resource_router(client_spec)
manufacturer_router = build_resource_router(manufacturer_spec)
supplier_router = build_resource_router(supplier_spec)
transporter_router = build_resource_router(transporter_spec)
pallet_router = build_resource_router(pallet_spec)
size_router = build_resource_router(size_spec)
