from pydantic import BaseModel, Field
from typing import List, Optional, Union, Dict, Any

# --- Generic Models ---
class ErrorResponse(BaseModel):
    detail: Union[str, List[Dict[str, Any]]]

class HealthResponse(BaseModel):
    status: str

# --- Grid Models ---
class PointModel(BaseModel):
    x: int
    y: int

class NodeModel(BaseModel):
    # Only is_wall matters on input; the rest is search output echoed back by the grid endpoint.
    point: Optional[PointModel] = None
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    is_wall: bool = False
    is_start: bool = False
    is_end: bool = False
    is_path: bool = False
    visited: bool = False
    in_open_set: bool = False

class GridModel(BaseModel):
    width: int
    height: int
    nodes: List[List[NodeModel]]
    start: PointModel
    end: PointModel

class GridResponse(BaseModel):
    grid: GridModel

# --- Pathfinding Models ---
class PathfindingRequest(BaseModel):
    grid: GridModel
    heuristic: Optional[str] = None # "manhattan" or "euclidean"; unknown names fall back to manhattan
    animate: bool = False

class StepModel(BaseModel):
    current_node: PointModel
    open_set: List[PointModel]
    closed_set: List[PointModel]
    path: Optional[List[PointModel]] = None # only on the final step
    is_complete: bool = False

class PathfindingResponse(BaseModel):
    success: bool
    path: List[PointModel] = Field(default_factory=list)
    explored_nodes: List[PointModel] = Field(default_factory=list)
    path_length: float = 0.0
    nodes_explored: int = 0
    steps: Optional[List[StepModel]] = None # omitted from the JSON unless animation was requested
