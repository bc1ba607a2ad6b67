"""Route derivation core: domain-to-pattern mapping and TOML emission.

Both components are stateless: safe to share across threads and to call
concurrently without coordination.
"""

from routectl.routing.builder import RouteConfigBuilder
from routectl.routing.mapper import RouteMapper
from routectl.routing.policy import ConfigRoutingPolicy, RoutingPolicy

__all__ = ["ConfigRoutingPolicy", "RouteConfigBuilder", "RouteMapper", "RoutingPolicy"]
