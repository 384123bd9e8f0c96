from flask import Blueprint

from menumaster.models.category import Category
from menumaster.routes.handlers import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    update_document,
)

category_bp = Blueprint('categories', __name__)


@category_bp.route('', methods=['POST'])
def create_category():
    """Create a category; an optional 'image' file is uploaded to the image host"""
    return create_document(Category)


@category_bp.route('', methods=['GET'])
def list_categories():
    return list_documents(Category)


@category_bp.route('/<doc_id>', methods=['GET'])
def get_category(doc_id):
    return get_document(Category, doc_id)


@category_bp.route('/<doc_id>', methods=['PUT'])
def update_category(doc_id):
    """Update a category; a new 'image' file replaces the stored one"""
    return update_document(Category, doc_id)


@category_bp.route('/<doc_id>', methods=['DELETE'])
def delete_category(doc_id):
    return delete_document(Category, doc_id)
