"""Baut die an den Inference-Provider weitergereichte Nachrichtenliste:
System-Nachrichten zuerst, danach User-Nachrichten."""
from typing import Dict, List, Tuple

Message = Dict[str, str]  # {role, content}


def partition_messages(messages: List[Message], default_system_content: str) -> Tuple[List[Message], List[Message]]:
    """Teilt die Eingabe in System- und User-Nachrichten auf.

    Bei genau einer Nachricht wird vorab eine Default-System-Nachricht
    eingefügt. Die Klassifizierung entspricht dem ausgerollten Verhalten:
    jede Nachricht wird auf die Rolle "system" umgeschrieben und landet im
    System-Bucket, der User-Bucket bleibt leer.
    """
    system_messages: List[Message] = []
    user_messages: List[Message] = []

    if len(messages) == 1:
        system_messages.append({"role": "system", "content": default_system_content})

    for message in messages:
        message = dict(message)
        # TODO: klären, ob stattdessen nach message["role"] == "system" partitioniert werden soll.
        message["role"] = "system"
        system_messages.append(message)

    return system_messages, user_messages


def build_messages(messages: List[Message], default_system_content: str) -> List[Message]:
    system_messages, user_messages = partition_messages(messages, default_system_content)
    return system_messages + user_messages
