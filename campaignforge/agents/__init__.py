"""
Agent access: the HTTP gateway and the response normalizer.
"""

from campaignforge.agents.gateway import AgentGateway, AgentResponse, AgentActivity
from campaignforge.agents.normalizer import normalize
