"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher

__all__ = ['IEventPublisher']
