from .state import BaseGraphState, BaseResult, generate_request_id
from .audit import append_event, log_observer
from .execution import GraphExecutor

__all__ = [
    'BaseGraphState',
    'BaseResult',
    'generate_request_id',
    'append_event',
    'log_observer',
    'GraphExecutor',
]
