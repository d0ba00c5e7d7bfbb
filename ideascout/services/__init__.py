from ideascout.services.cluster_svc import ClusterService
from ideascout.services.mining_logic import IdeaMiner
from ideascout.services.search_svc import SearchService

__all__ = [
    "ClusterService",
    "IdeaMiner",
    "SearchService",
]
