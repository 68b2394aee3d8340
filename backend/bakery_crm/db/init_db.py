"""
Database initialization and bootstrapping.
Creates tables and seeds the default admin account and product catalog.
"""

from decimal import Decimal

from sqlalchemy import select, func

from bakery_crm.core.config import settings
from bakery_crm.core.logging import get_logger
from bakery_crm.db import session as db_session
from bakery_crm.db.base import Base
from bakery_crm.models import Product, ProductUnit
from bakery_crm.services.auth_service import AuthService

logger = get_logger(__name__)

DEFAULT_PRODUCTS = [
    {
        "name": "Simple Cakes",
        "base_price": Decimal("2500"),
        "unit": ProductUnit.KG,
        "options": ["Very Vanilla", "Chocolate Marble", "Strawberry Marble", "Strawberry", "Lemon", "Orange"],
    },
    {
        "name": "Classic Cakes",
        "base_price": Decimal("2800"),
        "unit": ProductUnit.KG,
        "options": ["Banana Bread", "Carrot", "Chocolate", "Red Velvet", "Funfetti"],
    },
    {
        "name": "Specialty Cakes",
        "base_price": Decimal("3000"),
        "unit": ProductUnit.KG,
        "options": ["Blueberry Lemon", "Cookies & Cream", "Salted Caramel", "Chocolate Caramel", "Chocolate Mint"],
    },
    {
        "name": "Bento Cakes",
        "base_price": Decimal("1200"),
        "unit": ProductUnit.PIECE,
        "options": ["Simple", "Classic", "Specialty"],
    },
    {
        "name": "Cupcakes",
        "base_price": Decimal("150"),
        "unit": ProductUnit.PIECE,
        "min_quantity": 6,
        "options": ["Simple/Classic", "Specialty"],
    },
    {
        "name": "Cookies & Brownies",
        "base_price": Decimal("100"),
        "unit": ProductUnit.PIECE,
        "min_quantity": 6,
        "options": [
            "Chocolate Chip Cookies",
            "Red Velvet White Choc Chip",
            "Death by Chocolate",
            "Classic Brownies",
            "Red Velvet Brownies",
        ],
    },
]


async def create_tables() -> None:
    """
    Create all database tables.
    There are no migrations; tables are created from the models when missing.
    """
    if not settings.DB_CREATE_TABLES:
        logger.info("Tables creation skipped (DB_CREATE_TABLES is off)")
        return
    
    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database tables initialized")


async def seed_initial_data() -> None:
    """
    Seed the default admin account and, when the catalog is empty, the product categories.
    Safe to run on every startup.
    """
    if not settings.SEED_DEFAULT_DATA:
        logger.info("Initial data seeding skipped")
        return
    
    async with db_session.get_sessionmaker()() as session:
        await AuthService(session).ensure_default_admin()
        
        product_count = (await session.execute(select(func.count()).select_from(Product))).scalar_one()
        if product_count == 0:
            for product in DEFAULT_PRODUCTS:
                session.add(Product(category=product["name"], **product))
            logger.info("Product catalog seeded", extra={"products": len(DEFAULT_PRODUCTS)})
        
        await session.commit()
