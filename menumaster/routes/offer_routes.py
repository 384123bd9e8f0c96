from flask import Blueprint

from menumaster.models.offer import Offer
from menumaster.routes.handlers import (
    create_document,
    delete_document,
    get_document,
    list_documents,
    update_document,
)

offer_bp = Blueprint('offers', __name__)


@offer_bp.route('', methods=['POST'])
def create_offer():
    """Create an offer from a JSON or form body"""
    return create_document(Offer)


@offer_bp.route('', methods=['GET'])
def list_offers():
    return list_documents(Offer)


@offer_bp.route('/<doc_id>', methods=['GET'])
def get_offer(doc_id):
    return get_document(Offer, doc_id)


@offer_bp.route('/<doc_id>', methods=['PUT'])
def update_offer(doc_id):
    """Update the submitted offer fields"""
    return update_document(Offer, doc_id)


@offer_bp.route('/<doc_id>', methods=['DELETE'])
def delete_offer(doc_id):
    return delete_document(Offer, doc_id)
