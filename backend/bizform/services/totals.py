"""
单据金额计算

与前端表单的算法一致，结果随单据一起冗余保存。
全部用 Decimal 计算，输出时保留两位小数（四舍五入）。
入参和出参都是 camelCase 字典，明细里的其他字段原样保留。
goods_bill_totals / trans_bill_totals 供前端账单表单调用，服务端保存账单时不重新计算。
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Dict, List, Mapping

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """None、空串、无法识别的值按 0 处理"""
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def money(value: Decimal) -> float:
    return float(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def performa_invoice_totals(invoice: Mapping[str, Any], sizes: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    形式发票

    quantitySqmt = boxes * 规格每箱平方米
    amount = quantitySqmt * ratePerSqmt
    grandTotal = subTotal - discount + freight

    sizes: {规格ID: 规格记录}，找不到规格的明细数量和金额为 0
    """
    items: List[Dict[str, Any]] = []
    sub_total = Decimal("0")
    for item in invoice.get("items") or []:
        size = sizes.get(str(item.get("sizeId"))) or {}
        quantity = to_decimal(item.get("boxes")) * to_decimal(size.get("sqmPerBox"))
        amount = quantity * to_decimal(item.get("ratePerSqmt"))
        sub_total += amount
        items.append({**item, "quantitySqmt": money(quantity), "amount": money(amount)})

    grand_total = sub_total - to_decimal(invoice.get("discount")) + to_decimal(invoice.get("freight"))
    return {
        **invoice,
        "items": items,
        "subTotal": money(sub_total),
        "grandTotal": money(grand_total),
    }


def goods_bill_totals(bill: Mapping[str, Any]) -> Dict[str, Any]:
    """
    工厂发票 / 供应商发票

    taxableAmount = quantity * rate * (1 - discountPercentage / 100)
    finalSubTotal = subTotal - discountAmount + insuranceAmount + freightAmount
    税额 = finalSubTotal * 税率 / 100
    grandTotal = finalSubTotal + 中央税 + 邦税 + roundOff
    """
    items: List[Dict[str, Any]] = []
    sub_total = Decimal("0")
    for item in bill.get("items") or []:
        discount_factor = 1 - to_decimal(item.get("discountPercentage")) / HUNDRED
        taxable = to_decimal(item.get("quantity")) * to_decimal(item.get("rate")) * discount_factor
        sub_total += taxable
        items.append({**item, "taxableAmount": money(taxable)})

    final_sub_total = (
        sub_total
        - to_decimal(bill.get("discountAmount"))
        + to_decimal(bill.get("insuranceAmount"))
        + to_decimal(bill.get("freightAmount"))
    )
    central_tax = final_sub_total * to_decimal(bill.get("centralTaxRate")) / HUNDRED
    state_tax = final_sub_total * to_decimal(bill.get("stateTaxRate")) / HUNDRED
    grand_total = final_sub_total + central_tax + state_tax + to_decimal(bill.get("roundOff"))

    return {
        **bill,
        "items": items,
        "subTotal": money(sub_total),
        "finalSubTotal": money(final_sub_total),
        "centralTaxAmount": money(central_tax),
        "stateTaxAmount": money(state_tax),
        "grandTotal": money(grand_total),
    }


def trans_bill_totals(bill: Mapping[str, Any]) -> Dict[str, Any]:
    """
    运输发票

    amount = quantity * rate
    cgst / sgst = subTotal * 税率 / 100
    totalPayable = subTotal + totalTax + roundOff
    """
    items: List[Dict[str, Any]] = []
    sub_total = Decimal("0")
    for item in bill.get("items") or []:
        amount = to_decimal(item.get("quantity")) * to_decimal(item.get("rate"))
        sub_total += amount
        items.append({**item, "amount": money(amount)})

    cgst = sub_total * to_decimal(bill.get("cgstRate")) / HUNDRED
    sgst = sub_total * to_decimal(bill.get("sgstRate")) / HUNDRED
    total_tax = cgst + sgst
    total_after_tax = sub_total + total_tax
    total_payable = total_after_tax + to_decimal(bill.get("roundOff"))

    return {
        **bill,
        "items": items,
        "subTotal": money(sub_total),
        "cgstAmount": money(cgst),
        "sgstAmount": money(sgst),
        "totalTax": money(total_tax),
        "totalAfterTax": money(total_after_tax),
        "totalPayable": money(total_payable),
    }
