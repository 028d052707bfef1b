# -*- coding: utf-8 -*-
from .external import CommandError, SubprocessRunner, ToolNotFound
from .indexer import (SourceNotFound, IndexReport, BundlePaths, bundle_paths, big_db_dir,
                      db_indexed, ensure_index, load_metadata)

__version__ = "0.1.0"
