"""mongosh invocation inside the managed container.

Scripts are fixed strings. Operator values travel as environment variables
forwarded with ``docker exec -e NAME`` (value taken from the docker client's
environment), and the scripts read them through ``process.env``. Nothing the
operator types is ever spliced into script text or placed on the command line.
"""

import subprocess

from mongodock.config import SYSTEM_DATABASES
from mongodock.ui.components import console, show_table
from mongodock.utils.error_handler import handle_error, handle_exception
from mongodock.utils.shell import run_command

# Environment variables carrying operator input into mongosh
ENV_DATABASE = "MONGODOCK_DB"
ENV_USERNAME = "MONGODOCK_USER"
ENV_PASSWORD = "MONGODOCK_PWD"

LIST_DATABASES_SCRIPT = (
    "const hidden = [" + ", ".join(f"'{name}'" for name in SYSTEM_DATABASES) + "];"
    " db.adminCommand({ listDatabases: 1 }).databases"
    ".forEach(d => { if (!hidden.includes(d.name)) print(d.name) });"
)

CREATE_DATABASE_SCRIPT = (
    f"db.getSiblingDB(process.env.{ENV_DATABASE}).createCollection('initial_collection')"
)

CREATE_USER_SCRIPT = f"""
const dbName = process.env.{ENV_DATABASE};
db.getSiblingDB(dbName).createUser({{
    user: process.env.{ENV_USERNAME},
    pwd: process.env.{ENV_PASSWORD},
    roles: [{{ role: 'readWrite', db: dbName }}],
}});
"""

ADMIN_USERS_SCRIPT = """
const res = db.getSiblingDB('admin').getUsers();
const users = Array.isArray(res) ? res : res.users;
if (users.length === 0) {
    print("No administrative users found.");
} else {
    users.forEach(u => print(u.user + "  roles: " + u.roles.map(r => r.role + "@" + r.db).join(", ")));
}
"""

DATABASE_INFO_SCRIPT = """
const hidden = [%s];
db.adminCommand({ listDatabases: 1 }).databases.forEach(dbInfo => {
    if (hidden.includes(dbInfo.name)) return;

    const currentDb = db.getSiblingDB(dbInfo.name);

    print("\\n========================================================");
    print("DATABASE: " + dbInfo.name);
    print("========================================================");

    print("\\n--- USERS ---");
    const res = currentDb.getUsers();
    const users = Array.isArray(res) ? res : res.users;
    if (users.length > 0) {
        printjson(users);
    } else {
        print("No users found in this database.");
    }

    print("\\n--- STATS ---");
    printjson(currentDb.stats());
});
""" % ", ".join(f"'{name}'" for name in SYSTEM_DATABASES)


def build_mongosh_command(settings, script, params=None):
    """
    Build the `docker exec ... mongosh --eval` argument list.

    Args:
        settings: Settings in effect
        script: Fixed mongosh script text
        params: Mapping of environment variable names to operator values

    Returns:
        list: Arguments; parameter names appear, values never do
    """
    command = [settings.docker_bin, "exec", "-i"]
    for name in sorted(params or {}):
        command.extend(["-e", name])
    command.extend([settings.container_name, settings.shell_bin, "--quiet", "--eval", script])
    return command


def run_mongosh(settings, script, params=None, capture_output=False):
    """
    Evaluate a script with mongosh in the container.

    Args:
        settings: Settings in effect
        script: Fixed mongosh script text
        params: Mapping of environment variable names to operator values
        capture_output: If True, capture stdout instead of streaming it

    Returns:
        subprocess.CompletedProcess

    Raises:
        FileNotFoundError: If the docker executable is missing
    """
    command = build_mongosh_command(settings, script, params)
    return run_command(
        command,
        capture_output=capture_output,
        check=False,
        silent=True,
        env=dict(params) if params else None,
    )


def get_user_databases(settings):
    """
    Return names of databases other than local/config.

    Returns:
        list: Database names, or None if the listing failed
    """
    try:
        result = run_mongosh(settings, LIST_DATABASES_SCRIPT, capture_output=True)
    except OSError as e:
        handle_exception("E3004", "Could not fetch database list.", e)
        return None

    if result.returncode != 0:
        handle_error("E3004", "Could not fetch database list.", details=mongosh_failed(result))
        return None

    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def show_user_databases(settings):
    """Print the user databases, or a hint when none exist yet."""
    console.print()
    console.print("[cyan]Fetching available databases...[/cyan]")
    databases = get_user_databases(settings)
    if databases is None:
        return None

    if not databases:
        console.print("[yellow]No user-created databases found yet. 'admin' is always available.[/yellow]")
        return databases

    columns = [
        {"name": "#", "justify": "right", "style": "dim"},
        {"name": "Database", "style": "cyan"},
    ]
    rows = [[i, name] for i, name in enumerate(databases, 1)]
    show_table("Available databases", columns, rows)
    return databases


def mongosh_failed(result):
    """Return stderr text of a failed run for error details."""
    if isinstance(result, subprocess.CompletedProcess) and result.stderr:
        return result.stderr.strip()
    return None
