# deftree:header:start
#
#   project      : DefTree
#   file         : app_config.py
#   file_relpath : src/deftree/presets/app_config.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Configuration definition of a backend web application's infrastructure.

The definition covers the application name, an optional DNS zone, the
infrastructure pipeline repository, and the backend: its pipeline repository,
AWS environment, deployment environments (grouped into deployment *waves*),
autoscaling, listening port and health check.

Defaults:
    * ``backend.awsEnvironment.account`` comes from ``CDK_DEFAULT_ACCOUNT`` and may
      legitimately be unset (nullable default); the region defaults to ``us-west-2``.
    * Every environment deploys in wave 0 with autoscaling disabled on a single
      ``t3.nano,t3.micro`` instance.
    * The application listens on port 80 and is health-checked over HTTP on ``/``.

``dns`` and the per-environment ``description``/``subdomain`` are never defaulted.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from deftree.constants import DEFAULT_ACCOUNT_ENV_VAR
from deftree.schema.markers import no_default, nullable_default
from deftree.schema.model import ConfigSchema
from deftree.schema.shapes import array, boolean, integer, obj, optional, string
from deftree.utils.collections import group_by

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deftree.schema.shapes import ObjectShape

REPO_CONFIG_SHAPE: ObjectShape = obj(
    owner=string(),
    name=string(),
    branch=string(),
    connectionARN=string(),
)

DNS_CONFIG_SHAPE: ObjectShape = obj(
    hostedZoneId=string(),
    hostedZoneName=string(),
    commonSubdomain=no_default(optional(string())),
)

CDK_CONFIG_SHAPE: ObjectShape = obj(
    pipeline=obj(repo=REPO_CONFIG_SHAPE),
)

ENVIRONMENT_CONFIG_SHAPE: ObjectShape = obj(
    name=string(),
    description=no_default(optional(string())),
    subdomain=no_default(optional(string())),
    deployment=optional(obj(wave=optional(integer()))),
    autoscaling=optional(
        obj(
            enabled=optional(boolean()),
            minInstances=optional(integer()),
            maxInstances=optional(integer()),
            instanceTypes=optional(string()),
        )
    ),
)

BACKEND_CONFIG_SHAPE: ObjectShape = obj(
    pipeline=obj(repo=REPO_CONFIG_SHAPE),
    awsEnvironment=optional(
        obj(
            account=nullable_default(optional(string())),
            region=optional(string()),
        )
    ),
    environments=array(ENVIRONMENT_CONFIG_SHAPE, non_empty=True),
    application=optional(obj(listeningPort=optional(integer()))),
    healthCheck=optional(
        obj(
            protocol=optional(string("HTTP", "HTTPS")),
            path=optional(string()),
        )
    ),
)

APP_CONFIG_SHAPE: ObjectShape = obj(
    appName=string(),
    dns=no_default(optional(DNS_CONFIG_SHAPE)),
    cdk=CDK_CONFIG_SHAPE,
    backend=BACKEND_CONFIG_SHAPE,
)


def default_app_config(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Return the defaults tree of `APP_CONFIG_SHAPE`.

    Args:
        env (Mapping[str, str] | None): Environment to read ``CDK_DEFAULT_ACCOUNT``
            from; defaults to ``os.environ``.

    Returns:
        dict[str, Any]: A new defaults tree.
    """
    env = os.environ if env is None else env
    return {
        "backend_defaults": {
            "awsEnvironment": {},
            "awsEnvironment_defaults": {
                "account": env.get(DEFAULT_ACCOUNT_ENV_VAR),
                "region": "us-west-2",
            },
            "environments_defaults": {
                "autoscaling": {},
                "autoscaling_defaults": {
                    "enabled": False,
                    "minInstances": 1,
                    "maxInstances": 1,
                    "instanceTypes": "t3.nano,t3.micro",
                },
                "deployment": {},
                "deployment_defaults": {
                    "wave": 0,
                },
            },
            "application": {},
            "application_defaults": {
                "listeningPort": 80,
            },
            "healthCheck": {},
            "healthCheck_defaults": {
                "protocol": "HTTP",
                "path": "/",
            },
        },
    }


def app_config_schema(env: Mapping[str, str] | None = None) -> ConfigSchema:
    """Return a `ConfigSchema` for the application definition and its defaults."""
    return ConfigSchema(APP_CONFIG_SHAPE, default_app_config(env))


def final_app_config(
    config: Mapping[str, Any],
    *,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Resolve an application config against its defaults.

    Raises:
        MissingRequiredFieldError: If a required field is missing from ``config``.
        ShapeMismatchError: If ``config`` holds values of the wrong type.
    """
    return app_config_schema(env).resolve(config)


def environments_by_wave(final_config: Mapping[str, Any]) -> dict[int, list[dict[str, Any]]]:
    """Group the backend environments of a resolved config by deployment wave.

    Returns:
        dict[int, list[dict[str, Any]]]: Environments per wave, in ascending wave order.
    """
    environments: list[dict[str, Any]] = final_config["backend"]["environments"]
    waves = group_by(environments, lambda e: int(e["deployment"]["wave"]))
    return dict(sorted(waves.items()))
