"""Namespaced SDKs, each wrapping a group of Hop API endpoints."""

from hop_sdk.sdks.channels import Channels, ChannelTokens
from hop_sdk.sdks.ignite import Containers, Deployments, Domains, Gateways, Groups, Ignite
from hop_sdk.sdks.pipe import Pipe, Rooms
from hop_sdk.sdks.projects import Projects, ProjectTokens, Secrets, Webhooks
from hop_sdk.sdks.registry import Images, Registry
from hop_sdk.sdks.users import PersonalAccessTokens, Users

__all__ = [
    "Channels",
    "ChannelTokens",
    "Containers",
    "Deployments",
    "Domains",
    "Gateways",
    "Groups",
    "Ignite",
    "Images",
    "PersonalAccessTokens",
    "Pipe",
    "Projects",
    "ProjectTokens",
    "Registry",
    "Rooms",
    "Secrets",
    "Users",
    "Webhooks",
]
