from fastlocal.materializers.base import BaseMaterializer, register_materializer, get_materializer, list_materializers  # noqa: F401

# Import built-in materializers to trigger registration
import fastlocal.materializers.file  # noqa: F401
