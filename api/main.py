"""
FastAPI backend: cluster a batch of names, either freely (/group) or around
caller-supplied seed clusters (/cluster). Nothing is stored between requests.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dotenv import load_dotenv

from clustering.settings import default_ignore, default_k_not_shared, default_k_shared
from core.engine import cluster, create_init_clusters, group
from core.models import SeedSpec
from extractors.names import DEFAULT_NAME_FIELD, NameExtractionError, key_getter

load_dotenv(override=True)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("name_clusters.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "defaults k_shared=%s k_not_shared=%s ignore=%d words",
        default_k_shared(), default_k_not_shared(), len(default_ignore()),
    )
    yield


app = FastAPI(title="Name Clusters API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------------------------------------------------------
# Request models
# -----------------------------------------------------------------------------
class GroupRequest(BaseModel):
    items: list[Union[str, dict]]
    k_shared: Optional[float] = None  # falls back to CLUSTER_K_SHARED
    k_not_shared: Optional[float] = None  # falls back to CLUSTER_K_NOT_SHARED
    ignore: Optional[list[str]] = None  # falls back to CLUSTER_IGNORE
    name_field: str = DEFAULT_NAME_FIELD  # key holding the name when items are objects


class SeedRequest(BaseModel):
    label: str
    name: str  # phrase whose words define the cluster


class ClusterRequest(GroupRequest):
    seeds: list[SeedRequest] = []


NO_CACHE_HEADERS = {"Cache-Control": "no-store, no-cache, must-revalidate", "Pragma": "no-cache"}


def _resolve(body: GroupRequest) -> tuple[float, float, frozenset[str]]:
    k_shared = body.k_shared if body.k_shared is not None else default_k_shared()
    k_not_shared = body.k_not_shared if body.k_not_shared is not None else default_k_not_shared()
    if body.ignore is not None:
        ignore = frozenset(w.strip().lower() for w in body.ignore if w.strip())
    else:
        ignore = default_ignore()
    return k_shared, k_not_shared, ignore


def _bad_item(e: NameExtractionError) -> JSONResponse:
    logger.warning("request rejected: %s", e)
    return JSONResponse(status_code=422, content={"detail": str(e)}, headers=NO_CACHE_HEADERS)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@app.post("/group")
def post_group(body: GroupRequest):
    """Partition items into emergent clusters of names sharing rare words."""
    k_shared, k_not_shared, ignore = _resolve(body)
    get_name = key_getter(body.name_field)
    logger.info("group received items=%d k_shared=%s k_not_shared=%s", len(body.items), k_shared, k_not_shared)
    try:
        clusters = group(k_shared, k_not_shared, ignore, body.items, get_name=get_name)
    except NameExtractionError as e:
        return _bad_item(e)
    return JSONResponse(
        content={
            "clusters": [c.to_dict(get_name) for c in clusters],
            "cluster_count": len(clusters),
        },
        headers=NO_CACHE_HEADERS,
    )


@app.post("/cluster")
def post_cluster(body: ClusterRequest):
    """Sort items into the given seed clusters; unmatched items come back under rejected."""
    k_shared, k_not_shared, ignore = _resolve(body)
    get_name = key_getter(body.name_field)
    seeds = create_init_clusters((SeedSpec(label=s.label, name=s.name) for s in body.seeds), ignore)
    logger.info("cluster received items=%d seeds=%d", len(body.items), len(seeds))
    try:
        result = cluster(k_shared, k_not_shared, ignore, seeds, body.items, get_name=get_name)
    except NameExtractionError as e:
        return _bad_item(e)
    content = result.to_dict(get_name)
    content["rejected_count"] = sum(len(v) for v in result.rejected.values())
    return JSONResponse(content=content, headers=NO_CACHE_HEADERS)


@app.get("/health")
def health():
    return JSONResponse(
        content={"status": "ok", "k_shared": default_k_shared(), "k_not_shared": default_k_not_shared()},
        headers=NO_CACHE_HEADERS,
    )
