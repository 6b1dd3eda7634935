from nrel.transport.runner.environment import Environment
from nrel.transport.runner.session import Session
