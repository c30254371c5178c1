class UnsupportedOperation(AttributeError):
    """Appel d'une opération qui n'est pas une demande de rendu `render_<type_id>`."""
