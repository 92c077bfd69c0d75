"""
初始化数据库

    python init_db.py          创建所有表
    python init_db.py --demo   创建表并写入一组演示主数据（库为空时）
"""
import asyncio
import logging
import sys

from sqlalchemy import func, select

from bizform.db import session as db_session
from bizform.db.init_db import ensure_tables_exist
from bizform.models import Bank, Client, Company, Product, Size

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def insert_demo_data() -> None:
    async with db_session.SessionLocal() as db:
        count = (await db.execute(select(func.count()).select_from(Company))).scalar_one()
        if count:
            logger.info("已有出口商数据，跳过演示数据")
            return

        size = Size(
            size="600x1200", sqm_per_box=1.44, box_weight=28, purchase_price=210,
            sales_price=8.5, hsn_code="69072100", pallet_details="26 boxes per pallet",
        )
        db.add_all([
            Company(
                company_name="Demo Exports", contact_person="Admin", address="Morbi, Gujarat",
                phone_number="0000000000", iec_number="IEC0000000", gst_number="24AAAAA0000A1Z5",
            ),
            Bank(
                bank_name="Demo Bank", bank_address="Morbi", account_number="000111222",
                swift_code="DEMOINBB", ifsc_code="DEMO0000001",
            ),
            Client(
                company_name="Demo Client LLC", person="Buyer", contact_number="+1000000",
                address="1 Harbour Road", city="Dubai", country="UAE", pin_code="00000",
            ),
            size,
        ])
        try:
            await db.flush()
            db.add(Product(size_id=size.id, design_name="Statuario", sales_price=8.5, box_weight=28))
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("演示数据写入完成")


async def init_db(demo: bool = False) -> None:
    """
    初始化数据库
    """
    try:
        logger.info("创建数据库表...")
        await ensure_tables_exist()
        logger.info("数据库表创建成功")
        if demo:
            await insert_demo_data()
        logger.info("数据库初始化完成")
    except Exception as e:
        logger.error(f"数据库初始化失败: {e}")
        raise
    finally:
        await db_session.dispose_engine()

if __name__ == "__main__":
    asyncio.run(init_db(demo="--demo" in sys.argv[1:]))
