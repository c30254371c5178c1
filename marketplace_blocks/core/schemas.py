"""
Vue typée (Pydantic) d'un arbre de blocs.
Les arbres circulent en dict ; BlockNode sert à valider et à lire l'ordre de rendu.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BlockNode(BaseModel):
    """Noeud d'arbre : un conteneur, une partie de template, un formulaire, etc."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: Optional[str] = None
    order: float = Field(default=0, alias="_order")
    optional: bool = False
    label: Optional[str] = Field(default=None, alias="_label")
    capability: Optional[str] = Field(default=None, alias="_capability")
    tag: Optional[str] = None
    title: Optional[str] = None
    path: Optional[str] = None
    template: Optional[str] = None
    form: Optional[str] = None
    menu: Optional[str] = None
    area: Optional[str] = None
    columns: Optional[int] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    blocks: Dict[str, "BlockNode"] = Field(default_factory=dict)

    @classmethod
    def from_tree(cls, tree: Mapping) -> "BlockNode":
        return cls.model_validate(dict(tree))

    def ordered_blocks(self) -> List[Tuple[str, "BlockNode"]]:
        return sorted(self.blocks.items(), key=lambda item: (item[1].order, item[0]))

    @property
    def css_classes(self) -> List[str]:
        value = self.attributes.get("class", [])
        return [value] if isinstance(value, str) else list(value)
