from flask import Blueprint

from menumaster.models.restaurant_admin import RestaurantAdmin
from menumaster.routes.handlers import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    update_document,
)

restaurant_admin_bp = Blueprint('restaurantAdmins', __name__)


@restaurant_admin_bp.route('', methods=['POST'])
def create_restaurant_admin():
    """Create a restaurant admin"""
    return create_document(RestaurantAdmin)


@restaurant_admin_bp.route('', methods=['GET'])
def list_restaurant_admins():
    return list_documents(RestaurantAdmin)


@restaurant_admin_bp.route('/<doc_id>', methods=['GET'])
def get_restaurant_admin(doc_id):
    return get_document(RestaurantAdmin, doc_id)


@restaurant_admin_bp.route('/<doc_id>', methods=['PUT'])
def update_restaurant_admin(doc_id):
    """Update the submitted admin fields"""
    return update_document(RestaurantAdmin, doc_id)


@restaurant_admin_bp.route('/<doc_id>', methods=['DELETE'])
def delete_restaurant_admin(doc_id):
    return delete_document(RestaurantAdmin, doc_id)
