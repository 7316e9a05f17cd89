# gotismadex

A small HTTP API skeleton built on Flask. It reads its settings from a
YAML file, connects to a MySQL server and creates the database if it is
missing, guards every route under `/auth` with a session token, and
serves health endpoints.

## Installation

```
pip install .
```

To run the tests you also need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
gotismadex -conf conf/conf_local.yaml -swagger /conf/swagger.yaml
```

* `-conf` (or `--conf`) is the path of the YAML configuration file. By
  default it is `conf/conf_local.yaml` under the current directory.
* `-swagger` (or `--swagger`) is the URL path of the API description
  file. The file is served from the current directory at that path. The
  default is `/conf/swagger.yaml`.

On start-up the program prints its banner and version, reads the
configuration, creates the database if needed and connects to it,
registers the modules' routes and serves the application with Flask's
built-in server on all interfaces, on the port given by `portapi`.

A MySQL server must be reachable: if the database cannot be created or
connected to, the program logs a critical line and exits with status 1.
It does the same when the configuration file cannot be read.

## Configuration

```yaml
userdb: root
passdb: PASS_DB          # name of the environment variable holding the password
ipdb: 127.0.0.1
portdb: "3306"
namedb: gotismadex
extradb: "?parseTime=true"
portapi: "8080"
loglevel: 0              # 0 = everything, 1 = warnings and up, 2+ = errors only
usersapi: [tester]
tokensapi: [TOKEN_API_TEST]  # names of environment variables holding each user's token
specimen: false
nameapi: Gotismadex
country: FR
```

The database password and the API tokens are never written in the file
itself: the file names the environment variables that hold them. Each
entry of `usersapi` is paired with the entry of `tokensapi` at the same
position; a user without a token variable is an error.

Unknown keys are ignored. String fields also accept plain numbers
(`portdb: 3306`); `loglevel` must be an integer, `specimen` a boolean and
`usersapi`/`tokensapi` lists. A missing file, invalid YAML or a value of
the wrong kind raises `gotismadex.config.ConfigError`.

## Endpoints

| Method | Path                  | Auth | Returns                                   |
|--------|-----------------------|------|-------------------------------------------|
| GET    | `/health`             | no   | `title` and `message`                     |
| GET    | `/auth/status`        | yes  | `title`, `name`, `version`, `message` and `dbstatus` |
| GET    | `/auth/profile`       | yes  | the loaded configuration                  |
| GET    | `/swagger`            | no   | Swagger UI page for the description file  |
| GET    | `/docs`               | no   | ReDoc page for the description file       |
| GET    | the `-swagger` path   | no   | the API description file itself           |

Requests under `/auth` must carry a token in the `X-Session-Token`
header, for example `X-Session-Token: token`; otherwise the answer is
`403 Forbidden`.

`dbstatus` is `everything is awesome <3` when the database answers a
ping, and `failed : <reason>` otherwise. The profile lists the
configuration fields under the keys `ConfPath`, `Userdb`, `Passdb`,
`Ipdb`, `Portdb`, `Namedb`, `Extradb`, `PortApi`, `Loglevel`,
`Usersapi`, `Tokensapi`, `Specimen`, `Nameapi` and `Country`; `Passdb`
and `Tokensapi` hold the names of environment variables, not their
values.

The version reported is that of the installed `gotismadex` distribution,
or `latest` when it is not installed. The `/swagger` and `/docs` pages
load their scripts from a public CDN. A request for `/path/` that is
only routed as `/path` is redirected there with `301`.

## Logging

Log lines go to standard output (info) or standard error (warning,
error, critical) as `key=value` pairs:

```
timestamp="2024-01-01 12:00:00" level=INFO endpoint=main message="API ready."
```

Use `gotismadex.logger.get_logger()` for the application-wide logger.
`Logger.critical(..., exit=True)` raises `SystemExit(1)` after writing
its line; pass `exit=False` to only log.

## Using it as a library

```python
from gotismadex.app import init_conf, launcher_modules
from gotismadex.database import database_init
from gotismadex.router import initialize_router, get_app

config = init_conf("conf/conf_local.yaml")
database_init(config)
initialize_router(config, "/conf/swagger.yaml")
launcher_modules()
app = get_app()   # a Flask application
```

Further token-protected routes can be added through
`gotismadex.router.get_secure_router().add_route(path, view)`, which
mounts them under `/auth`.

## What it does not do

* Setting `specimen: true` only logs `Specimen data charged up.`; no
  data is written to the database.
* The only module shipped is the health module; there are no other
  business endpoints and no tables are created.
* The server is Flask's built-in development server; run the Flask
  application from `get_app()` under a WSGI server for production use.