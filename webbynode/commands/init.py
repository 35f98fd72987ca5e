"""Initialize the current folder as a deployable application"""

from .base import Command
from .registry import register
from .schema import CommandSpec, ParameterDef
from ..constants import (
    EMOJI_SUCCESS,
    GITIGNORE_FILE,
    GITIGNORE_TEMPLATE,
    INITIAL_COMMIT_MESSAGE,
    MARKER_DIR,
    REMOTE_NAME,
)


@register()
class Init(Command):
    spec = CommandSpec(
        description="Initializes the current folder as a deployable application",
        parameters=(
            ParameterDef("webby", str, "Name or IP of the Webby to deploy to"),
            ParameterDef("dns", str, "The DNS used for this application", required=False),
        )
    )

    def execute(self):
        io = self.context.io
        git = self.context.git

        webby = self.param("webby")
        app_name = io.app_name()
        host = self.param("dns") or app_name

        if not self.context.pushand.present():
            self.out(f"Initializing deployment descriptor for {host}...")
            self.context.pushand.create(host)

        if not io.file_exists(GITIGNORE_FILE):
            self.out(f"Creating {GITIGNORE_FILE} file...")
            io.create_file(GITIGNORE_FILE, GITIGNORE_TEMPLATE)

        if not io.directory(MARKER_DIR):
            io.mkdir(MARKER_DIR)

        if not git.present():
            self.out("Initializing git repository...")
            git.init()
            git.add_remote(REMOTE_NAME, webby, app_name)
            git.add(".")
            git.commit(INITIAL_COMMIT_MESSAGE)
        elif not git.remote_is_configured():
            self.out(f"Adding {REMOTE_NAME} remote...")
            git.add_remote(REMOTE_NAME, webby, app_name)

        self.out(f"{EMOJI_SUCCESS} Application {app_name} ready for deployment to {webby}.")
        self.notify(f"Application {app_name} initialized.")
