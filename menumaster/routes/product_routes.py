from flask import Blueprint

from menumaster.models.product import Product
from menumaster.routes.handlers import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    update_document,
)

product_bp = Blueprint('products', __name__)


@product_bp.route('', methods=['POST'])
def create_product():
    """Create a product; an optional 'image' file is uploaded to the image host"""
    return create_document(Product)


@product_bp.route('', methods=['GET'])
def list_products():
    return list_documents(Product)


@product_bp.route('/<doc_id>', methods=['GET'])
def get_product(doc_id):
    return get_document(Product, doc_id)


@product_bp.route('/<doc_id>', methods=['PUT'])
def update_product(doc_id):
    """Update a product; a new 'image' file replaces the stored one"""
    return update_document(Product, doc_id)


@product_bp.route('/<doc_id>', methods=['DELETE'])
def delete_product(doc_id):
    return delete_document(Product, doc_id)
