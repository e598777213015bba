"""
agent-toolbox: tools an orchestrating agent can select and call.
"""

__version__ = "0.1.0"
