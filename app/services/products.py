"""
Product Service

CRUD for store products.
"""

import logging

from app.extensions import db
from app.models import Product

logger = logging.getLogger(__name__)


def list_products(in_stock_only=False):
    """Products newest first; the public store only sees in-stock items."""
    query = Product.query
    if in_stock_only:
        query = query.filter_by(in_stock=True)
    return query.order_by(Product.created_at.desc(), Product.id.desc()).all()


def get_product(product_id):
    return db.session.get(Product, product_id)


def create_product(data, image_path):
    product = Product(
        name=data.name,
        description=data.description,
        price=data.price,
        image=image_path,
        category=data.category,
        in_stock=data.in_stock,
    )
    db.session.add(product)
    db.session.commit()
    logger.info('Product %s (%s) created', product.id, product.name)
    return product


def update_product(product_id, data, image_path=None):
    """Apply a ProductUpdate. Returns None if the product does not exist."""
    product = get_product(product_id)
    if product is None:
        return None

    values = data.model_dump(exclude_unset=True, exclude_none=True)
    if image_path:
        values['image'] = image_path
    for field, value in values.items():
        setattr(product, field, value)
    db.session.commit()
    logger.info('Product %s updated', product_id)
    return product


def delete_product(product_id):
    product = get_product(product_id)
    if product is None:
        return False
    db.session.delete(product)
    db.session.commit()
    logger.info('Product %s deleted', product_id)
    return True
