"""
Product API Routes
"""

from flask import abort, jsonify

from app.admin.decorators import admin_required
from app.api import api_bp
from app.api.helpers import not_found, parse_id, save_uploaded_image, validate_body
from app.schemas import ProductCreate, ProductUpdate
from app.services import products, uploads


@api_bp.route('/products', methods=['GET'])
def list_products():
    """Public store listing: in-stock products only."""
    return jsonify([p.to_dict() for p in products.list_products(in_stock_only=True)])


@api_bp.route('/admin/products', methods=['GET'])
@admin_required
def admin_list_products():
    return jsonify([p.to_dict() for p in products.list_products()])


@api_bp.route('/admin/products/<product_id>', methods=['GET'])
@admin_required
def admin_get_product(product_id):
    product = products.get_product(parse_id(product_id))
    if product is None:
        not_found()
    return jsonify(product.to_dict())


@api_bp.route('/admin/products', methods=['POST'])
@admin_required
def admin_create_product():
    data = validate_body(ProductCreate)
    uploaded = save_uploaded_image()
    image_path = uploaded or data.image
    if not image_path:
        abort(400, description='Image is required')

    try:
        product = products.create_product(data, image_path=image_path)
    except Exception:
        uploads.remove_managed_image(uploaded)
        raise
    return jsonify(product.to_dict()), 201


@api_bp.route('/admin/products/<product_id>', methods=['PUT'])
@admin_required
def admin_update_product(product_id):
    product_id = parse_id(product_id)
    data = validate_body(ProductUpdate)
    if products.get_product(product_id) is None:
        not_found()

    uploaded = save_uploaded_image()
    try:
        product = products.update_product(product_id, data, image_path=uploaded)
    except Exception:
        uploads.remove_managed_image(uploaded)
        raise
    return jsonify(product.to_dict())


@api_bp.route('/admin/products/<product_id>', methods=['DELETE'])
@admin_required
def admin_delete_product(product_id):
    if not products.delete_product(parse_id(product_id)):
        not_found()
    return jsonify({'message': 'Deleted'})
