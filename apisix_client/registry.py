"""
Central registry for managing multiple APISIX clusters.
"""

import asyncio
import threading
from typing import Dict, List, Optional

from .cluster import Cluster, ClusterFactory, NonExistentCluster, new_cluster
from .config import Settings
from .exceptions import DuplicatedClusterError
from .models.cluster import ClusterOptions
from .utils.logging import get_logger

logger = get_logger(__name__)


class ClusterRegistry:
    """Registry of APISIX clusters with a mandatory default cluster.

    Names are unique across the registry and the default cluster's name can
    never be taken by another cluster. Looking up an unknown name returns a
    shared ``NonExistentCluster`` whose operations fail with
    ``ClusterNotFoundError``.
    """

    def __init__(self, options: ClusterOptions,
                 cluster_factory: Optional[ClusterFactory] = None):
        """Initialize the registry and build the default cluster.

        Args:
            options: Options of the default cluster
            cluster_factory: Callable building a Cluster from options
                (uses ``new_cluster`` if None)

        Raises:
            Whatever the factory raises, typically ClusterConstructionError
        """
        self._factory = cluster_factory or new_cluster

        self._default_cluster = self._factory(options)
        self._default_cluster_name = options.name
        self._non_existent_cluster = NonExistentCluster()

        self._clusters: Dict[str, Cluster] = {}

        # Thread safety
        self._lock = threading.RLock()

        logger.info(f"Cluster registry initialized with default cluster '{options.name}'")

    @classmethod
    def from_settings(cls, settings: Settings,
                      cluster_factory: Optional[ClusterFactory] = None) -> "ClusterRegistry":
        """Create a registry whose default cluster comes from settings."""
        return cls(settings.to_cluster_options(), cluster_factory=cluster_factory)

    @property
    def default_cluster_name(self) -> str:
        return self._default_cluster_name

    @property
    def default_cluster(self) -> Cluster:
        return self._default_cluster

    def cluster(self, name: str) -> Cluster:
        """Get the cluster registered under a name.

        Args:
            name: Cluster name

        Returns:
            The matching cluster, or the shared non-existent cluster when the
            name is unknown. Never raises.
        """
        if name == self._default_cluster_name:
            return self._default_cluster

        with self._lock:
            cluster = self._clusters.get(name)

        if cluster is None:
            logger.debug(f"Cluster '{name}' is not registered")
            return self._non_existent_cluster
        return cluster

    def add_cluster(self, options: ClusterOptions) -> None:
        """Build and register a new cluster.

        Args:
            options: Options of the cluster to add

        Raises:
            DuplicatedClusterError: If the name is the default cluster's name
                or is already registered
            Whatever the factory raises; the registry is left unchanged
        """
        name = options.name
        if name == self._default_cluster_name:
            logger.warning(f"Rejected cluster '{name}': name is taken by the default cluster")
            raise DuplicatedClusterError(name)

        with self._lock:
            if name in self._clusters:
                logger.warning(f"Rejected cluster '{name}': already registered")
                raise DuplicatedClusterError(name)

            try:
                cluster = self._factory(options)
            except Exception as e:
                logger.error(f"Failed to add cluster '{name}': {e}")
                raise

            self._clusters[name] = cluster

        logger.info(f"Added cluster '{name}'")

    def list_clusters(self) -> List[Cluster]:
        """List all registered clusters, default cluster first.

        The order of the remaining clusters is unspecified.
        """
        with self._lock:
            clusters = list(self._clusters.values())
        return [self._default_cluster] + clusters

    def has_cluster(self, name: str) -> bool:
        """Check whether a name resolves to a registered cluster."""
        if name == self._default_cluster_name:
            return True
        with self._lock:
            return name in self._clusters

    def cluster_names(self) -> List[str]:
        """Names of all registered clusters, default name first."""
        with self._lock:
            names = list(self._clusters.keys())
        return [self._default_cluster_name] + names

    async def aclose(self) -> None:
        """Release transport resources of every registered cluster.

        Every cluster is closed even when some of them fail; failures are
        logged.
        """
        clusters = self.list_clusters()
        results = await asyncio.gather(
            *(cluster.aclose() for cluster in clusters), return_exceptions=True
        )
        for cluster, result in zip(clusters, results):
            if isinstance(result, Exception):
                logger.error(f"Failed to close cluster '{cluster.name}': {result}")
        logger.info("Cluster registry closed")

    def __len__(self) -> int:
        with self._lock:
            return len(self._clusters) + 1

    def __contains__(self, name: str) -> bool:
        return self.has_cluster(name)
