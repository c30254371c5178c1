"""
Arbres de blocs : fusion profonde, recherche et ordre de rendu.

Un arbre est un dict imbriqué : {"blocks": {nom: noeud, ...}}, chaque noeud
pouvant porter ses propres "blocks". Politique de fusion par type de champ :

  scalaire           → l'override remplace
  dict               → fusion récursive clé par clé
  liste              → concaténation sans doublons (ordre de 1re occurrence),
                       sauf champs listés dans MergePolicy.replace
  "blocks"           → fusion par nom d'enfant ; un nom absent au niveau
                       courant mais présent plus bas dans la base est fusionné
                       à cet emplacement, sinon ajouté au niveau courant
  types différents   → l'override remplace

Restriction de la relocalisation par nom : elle suppose qu'un même nom
n'apparaît qu'à une seule profondeur dans les arbres fusionnés. Si un nom
existe à la racine d'un arbre et plus bas dans un autre ({"x"} et
{"p": {"blocks": {"x"}}}), le résultat dépend de l'ordre de fusion et
l'associativité n'est plus garantie. Même chose pour une clé dict d'un
côté et scalaire de l'autre.
"""
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple

BLOCKS_KEY = "blocks"
ORDER_KEY = "_order"


@dataclass(frozen=True)
class MergePolicy:
    replace: FrozenSet[str] = frozenset()
    unique: bool = True
    tree_key: str = BLOCKS_KEY


DEFAULT_POLICY = MergePolicy()


# ── Fusion ──────────────────────────────────────────────────────────────────

def merge_trees(base: Optional[Mapping], override: Optional[Mapping],
                policy: MergePolicy = DEFAULT_POLICY) -> Dict[str, Any]:
    """
    Fusionne `override` dans `base` et retourne un nouvel arbre.
    Aucun des deux arguments n'est modifié.
    """
    return _merge_mapping(base or {}, override or {}, policy)


def _merge_mapping(base: Mapping, override: Mapping, policy: MergePolicy) -> Dict[str, Any]:
    result = deepcopy(dict(base))
    for key, value in override.items():
        if key in result:
            result[key] = _merge_value(key, result[key], value, policy)
        else:
            result[key] = deepcopy(value)
    return result


def _merge_value(key: str, base: Any, value: Any, policy: MergePolicy) -> Any:
    if isinstance(base, Mapping) and isinstance(value, Mapping):
        if key == policy.tree_key:
            return _merge_blocks(base, value, policy)
        return _merge_mapping(base, value, policy)
    if isinstance(base, list) and isinstance(value, list) and key not in policy.replace:
        return _concat(base, value, policy.unique)
    return deepcopy(value)


def _merge_node(base: Any, node: Any, policy: MergePolicy) -> Any:
    if isinstance(base, Mapping) and isinstance(node, Mapping):
        return _merge_mapping(base, node, policy)
    return deepcopy(node)


def _merge_blocks(base: Mapping, override: Mapping, policy: MergePolicy) -> Dict[str, Any]:
    result = deepcopy(dict(base))
    for name, node in override.items():
        if name in result:
            result[name] = _merge_node(result[name], node, policy)
        elif not _merge_nested(result, name, node, policy):
            result[name] = deepcopy(node)
    return result


def _merge_nested(blocks: Dict[str, Any], name: str, node: Any, policy: MergePolicy) -> bool:
    """Fusionne `node` dans le premier descendant nommé `name` (profondeur d'abord)."""
    for child in blocks.values():
        if not isinstance(child, dict):
            continue
        children = child.get(policy.tree_key)
        if not isinstance(children, dict):
            continue
        if name in children:
            children[name] = _merge_node(children[name], node, policy)
            return True
        if _merge_nested(children, name, node, policy):
            return True
    return False


def _concat(base: list, value: list, unique: bool) -> list:
    items = list(base) + list(value)
    if not unique:
        return items
    result: list = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


# ── Lecture ─────────────────────────────────────────────────────────────────

def sort_blocks(blocks: Optional[Mapping]) -> List[Tuple[str, Any]]:
    """Enfants triés par (_order, nom) ; _order absent vaut 0."""
    return sorted(
        (blocks or {}).items(),
        key=lambda item: (_order_of(item[1]), item[0]),
    )


def _order_of(node: Any) -> float:
    if isinstance(node, Mapping):
        return node.get(ORDER_KEY) or 0
    return 0


def iter_blocks(tree: Mapping) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Aplatit l'arbre en (nom, noeud), profondeur d'abord, dans l'ordre de rendu."""
    for name, node in sort_blocks(tree.get(BLOCKS_KEY)):
        if not isinstance(node, Mapping):
            continue
        yield name, node
        yield from iter_blocks(node)


def find_block(tree: Mapping, name: str) -> Optional[Dict[str, Any]]:
    for block_name, node in iter_blocks(tree):
        if block_name == name:
            return node
    return None

