"""
The key command: create, update or delete a Meilisearch API key.

Missing key fields are asked for through a ``Prompter``; each invocation makes
exactly one create, update or delete call, preceded by an index listing (for
creation) or a key lookup (for updates).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from rich.console import Console

from .durations import resolve_expiry
from .errors import OperationFailedError, UsageError
from .logging import CommandLogger
from .models import KEY_ACTIONS, KeyRequest, RemoteKey, split_list
from .prompts import Prompter
from .security import sanitize_for_logging

CREATE = "create"
UPDATE = "update"
DELETE = "delete"

ACTION_LABELS = {
    CREATE: "creation",
    UPDATE: "modification",
    DELETE: "deletion",
}


class SearchEngine(Protocol):
    def get_key(self, key: str) -> Optional[Dict[str, Any]]: ...

    def create_key(self, options: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    def update_key(self, key: str, options: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    def delete_key(self, key: str) -> Any: ...

    def list_indexes(self) -> List[Dict[str, Any]]: ...


@dataclass
class KeyCommandOptions:
    """Arguments and flags of one invocation"""

    key: Optional[str] = None
    actions: Optional[str] = None
    indexes: Optional[str] = None
    expires: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    uid: Optional[str] = None
    create: bool = False
    update: bool = False
    delete: bool = False

    @property
    def selected_actions(self) -> List[str]:
        return [
            action
            for action, selected in ((CREATE, self.create), (UPDATE, self.update), (DELETE, self.delete))
            if selected
        ]


class KeyActionCommand:
    """Create, update or delete API keys"""

    def __init__(
        self,
        client: SearchEngine,
        prompter: Prompter,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        logger: Optional[CommandLogger] = None,
    ):
        self.client = client
        self.prompter = prompter
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.logger = logger or CommandLogger()

    def handle(self, options: KeyCommandOptions) -> int:
        """Run the command and return its exit code.

        Errors raised by the client are not caught.
        """
        try:
            action = self.resolve_action(options)
            return self.handle_action(action, options)
        except UsageError as e:
            self.error(e.message)
            return e.exit_code

    def resolve_action(self, options: KeyCommandOptions) -> str:
        selected = options.selected_actions

        if not options.key and not selected:
            raise UsageError("You need to specify an action or pass a key for this command.", 2)

        if (options.update or options.delete) and not options.key:
            raise UsageError(
                "You need to pass a key value or UUID to be able to perform this action.", 3
            )

        if len(selected) > 1:
            raise UsageError("Only one of --create, --update or --delete can be used at a time.", 2)

        if not selected:
            self.logger.warning(
                "No action flag given, creating a new key; the key argument is ignored",
                key=sanitize_for_logging(options.key),
            )
            return CREATE
        return selected[0]

    def handle_action(self, action: str, options: KeyCommandOptions) -> int:
        self.logger.info(
            "Performing key action",
            action=action,
            key=sanitize_for_logging(options.key),
        )

        if action == DELETE:
            self.handle_deletion(options)
        else:
            if action == UPDATE:
                result = self.handle_modification(options)
            else:
                result = self.handle_creation(options)
            try:
                self.ensure_key_returned(result)
            except OperationFailedError as e:
                self.logger.error("Key action returned no key", action=action, error=str(e))
                self.error("Something went wrong...")
                return OperationFailedError.exit_code

        self.console.print(
            f"Key {ACTION_LABELS[action]} action performed successfully!",
            style="green",
            markup=False,
        )
        return 0

    def handle_creation(self, options: KeyCommandOptions) -> Optional[Dict[str, Any]]:
        request = self.collect_creation_data(options)
        return self.client.create_key(request.to_create_payload())

    def handle_modification(self, options: KeyCommandOptions) -> Optional[Dict[str, Any]]:
        existing = RemoteKey.from_dict(self.client.get_key(options.key))
        request = KeyRequest()
        self.collect_common_data(options, existing, request)
        return self.client.update_key(options.key, request.to_update_payload())

    def handle_deletion(self, options: KeyCommandOptions) -> None:
        self.client.delete_key(options.key)

    def collect_creation_data(self, options: KeyCommandOptions) -> KeyRequest:
        request = KeyRequest(uid=options.uid or None)

        request.actions = self.ask_for_list(
            "Comma separated list of API actions to be allowed for this key",
            KEY_ACTIONS,
            options.actions,
        )

        index_uids = [index["uid"] for index in self.client.list_indexes() if index.get("uid")]
        request.indexes = self.ask_for_list(
            "Comma separated list of indexes the key is authorized to act on",
            index_uids,
            options.indexes,
        )

        expires = self.prompter.ask(
            "Date and time when the key will expire (e.g. 1 hour, 6 months, 10 years...)",
            options.expires or None,
        )
        try:
            request.expires_at = resolve_expiry(expires)
        except ValueError as e:
            raise UsageError(f"Invalid expiry: {e}", 2) from e

        self.collect_common_data(options, None, request)
        return request

    def collect_common_data(
        self,
        options: KeyCommandOptions,
        existing: Optional[RemoteKey],
        request: KeyRequest,
    ) -> None:
        """Ask for name and description; flags win over the stored key"""
        stored_name = existing.name if existing else None
        stored_description = existing.description if existing else None

        request.name = self.prompter.ask(
            "A human-readable name for the key",
            options.name or stored_name or "",
        )
        request.description = (
            self.prompter.ask(
                "An optional description for the key",
                options.description or stored_description or None,
            )
            or None
        )

    def ask_for_list(self, question: str, choices: List[str], given: Optional[str]) -> List[str]:
        answer = self.prompter.ask_with_completion(question, choices, given or "*")
        values = split_list(answer)
        if not values:
            raise UsageError(f"{question} cannot be empty.", 2)
        return values

    def ensure_key_returned(self, result: Optional[Dict[str, Any]]) -> None:
        key = RemoteKey.from_dict(result)
        if key is None or not key.uid:
            raise OperationFailedError("Meilisearch did not return a key uid")

    def error(self, message: str) -> None:
        self.error_console.print(message, style="bold red", markup=False)
