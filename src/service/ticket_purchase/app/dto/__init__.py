"""Ticket Purchase Application DTOs"""

from src.service.ticket_purchase.app.dto.purchase_dto import PurchaseRequest, PurchaseResult

__all__ = ['PurchaseRequest', 'PurchaseResult']
