"""Library catalog: relational consistency and query layer for Libraries,
Authors, Series, Stories, Volumes and Users."""
