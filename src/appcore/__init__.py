"""appcore: in-memory model of an app assembled from its source documents.

An app is one metadata document, any number of parameter documents, any
number of compose documents, and a tree of attachment files.  This
package loads those inputs, validates metadata and parameters against
fixed schemas, and exposes the result as an ``App``.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import io
    import appcore

    # Load an app directory by file convention
    app = appcore.new_app_from_default_files("my-app")
    print(app.metadata.name, [a.path for a in app.attachments])

    # Or compose the inputs yourself
    app = appcore.new_app(
        "my-app",
        appcore.with_metadata(io.BytesIO(b"name: my-app\\nversion: 0.1.0")),
        appcore.with_parameters_files("my-app/parameters.yml", "prod.yml"),
        appcore.with_cleanup(lambda: print("done")),
    )
    with app:
        ...

    appcore.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from appcore.builder import (  # noqa: E402
    AppBuilder,
    Option,
    new_app,
    new_app_from_default_files,
    with_attachments,
    with_cleanup,
    with_compose_files,
    with_composes,
    with_metadata,
    with_metadata_file,
    with_parameters,
    with_parameters_files,
    with_path,
    with_source,
)
from appcore.config import DEFAULT_FILE_NAMES, CoreFileNames  # noqa: E402
from appcore.errors import (  # noqa: E402
    AppBuildError,
    AppError,
    AppIOError,
    DocumentParseError,
    MetadataValidationError,
    NonStringKeyError,
    ParametersValidationError,
    ValidationError,
)
from appcore.model import (  # noqa: E402
    App,
    AppMetadata,
    AppSourceKind,
    Attachment,
    Maintainer,
)
from appcore.scanner import AttachmentScanner, scan_attachments  # noqa: E402
from appcore.schema import SchemaValidator, validate_metadata, validate_parameters  # noqa: E402

__all__ = [
    "__version__",
    "App",
    "AppMetadata",
    "AppSourceKind",
    "Attachment",
    "Maintainer",
    "AppBuilder",
    "Option",
    "new_app",
    "new_app_from_default_files",
    "with_path",
    "with_cleanup",
    "with_source",
    "with_parameters_files",
    "with_parameters",
    "with_compose_files",
    "with_composes",
    "with_metadata_file",
    "with_metadata",
    "with_attachments",
    "AttachmentScanner",
    "scan_attachments",
    "SchemaValidator",
    "validate_metadata",
    "validate_parameters",
    "CoreFileNames",
    "DEFAULT_FILE_NAMES",
    "AppError",
    "AppIOError",
    "AppBuildError",
    "DocumentParseError",
    "ValidationError",
    "MetadataValidationError",
    "ParametersValidationError",
    "NonStringKeyError",
]
