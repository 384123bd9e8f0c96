from flask import Blueprint

from menumaster.models.restaurant import Restaurant
from menumaster.routes.handlers import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    update_document,
)

restaurant_bp = Blueprint('restaurants', __name__)


@restaurant_bp.route('', methods=['POST'])
def create_restaurant():
    """Create a restaurant; an optional 'logo' file is uploaded to the image host"""
    return create_document(Restaurant)


@restaurant_bp.route('', methods=['GET'])
def list_restaurants():
    return list_documents(Restaurant)


@restaurant_bp.route('/<doc_id>', methods=['GET'])
def get_restaurant(doc_id):
    return get_document(Restaurant, doc_id)


@restaurant_bp.route('/<doc_id>', methods=['PUT'])
def update_restaurant(doc_id):
    """Update a restaurant; a new 'logo' file replaces the stored one"""
    return update_document(Restaurant, doc_id)


@restaurant_bp.route('/<doc_id>', methods=['DELETE'])
def delete_restaurant(doc_id):
    return delete_document(Restaurant, doc_id)
