"""
global constants
"""

# MySQL client default charset
DEFAULT_CHARSET = "utf8"

FLAVOR_MYSQL = "mysql"
FLAVOR_MARIADB = "mariadb"

DEFAULT_ADDR = "127.0.0.1:3306"
DEFAULT_USER = "root"
DEFAULT_PASSWORD = ""
DEFAULT_FLAVOR = FLAVOR_MYSQL

DEFAULT_DUMP_EXECUTION_PATH = "mysqldump"
# disables mysqldump --set-gtid-purged
DEFAULT_GTID_PURGED = "none"

# default server ids are drawn from [SERVER_ID_BASE, SERVER_ID_BASE + SERVER_ID_SPAN)
SERVER_ID_BASE = 1001
SERVER_ID_SPAN = 1000
MAX_SERVER_ID = 2**32 - 1

CONFIG_FORMAT_TOML = "toml"
CONFIG_FORMAT_YAML = "yaml"
YAML_SUFFIXES = (".yaml", ".yml")
