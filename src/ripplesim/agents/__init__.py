"""
Agents: autonomous bodies that swim over the water.

Agents only move; they never write to the ripple field.
- Agent: base class with position, velocity and heading
- SteeringAgent: wander steering at constant speed with soft walls
"""

from ripplesim.agents.base import Agent, AgentConfig
from ripplesim.agents.wander import SteeringAgent, WanderConfig, create_agent

__all__ = [
    "Agent",
    "AgentConfig",
    "SteeringAgent",
    "WanderConfig",
    "create_agent",
]
