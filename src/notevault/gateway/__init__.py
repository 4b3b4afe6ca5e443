from notevault.gateway.base import ExitOutcome, ProcessGateway
from notevault.gateway.subprocess_gateway import SubprocessGateway

__all__ = ["ExitOutcome", "ProcessGateway", "SubprocessGateway"]
