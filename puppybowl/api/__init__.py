"""Client layer for the remote Puppy Bowl REST API."""

from .client import PuppyBowlClient
from .result import Result

__all__ = ['PuppyBowlClient', 'Result']
