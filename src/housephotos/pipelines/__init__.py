"""
Pipelines Package

Producer/consumer plumbing for the photo pipeline:
- HandoffChannel: bounded queue between producer and workers
- HouseProducer: pages through the houses API

The coordinator lives in src.housephotos.pipelines.coordinator.
"""
from src.housephotos.pipelines.channel import HandoffChannel
from src.housephotos.pipelines.producer import HouseProducer

__all__ = ["HandoffChannel", "HouseProducer"]
