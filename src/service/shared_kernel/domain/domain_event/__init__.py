"""Shared Kernel Domain Events"""

from src.service.shared_kernel.domain.domain_event.domain_event import DomainEvent

__all__ = ['DomainEvent']
