# gh_label_state/core/operations.py

import json

from loguru import logger

from .codec import canonicalize_value, extract_state, format_label, label_name, matches_key
from .types import Label, Operation, OperationContext, OperationResult, StateMap
from .usage import is_used_elsewhere


def serialize_state(state: StateMap) -> str:
    """Serialize a state map as compact JSON with sorted keys"""
    return json.dumps(state, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _split_labels(context: OperationContext, key: str, labels: list[Label]) -> tuple[str | None, list[str]]:
    """Find the name of the first label for a key and the names of every label to keep

    All labels decoding to the key are dropped from the kept names, so a
    list that already holds duplicates for the key comes back with none.
    """
    existing = None
    keep = []
    for label in labels:
        if matches_key(label, key, context.prefix, context.separator):
            if existing is None:
                existing = label_name(label)
        else:
            keep.append(label_name(label))
    return existing, keep


def _cleanup_label(context: OperationContext, label_name: str) -> None:
    """Delete a label from the repository catalog unless another issue uses it"""
    if is_used_elsewhere(context, label_name):
        logger.info(f"Skipping deletion of label '{label_name}' as it is used by other issues/PRs")
        return

    try:
        context.service.delete_label(label_name)
        logger.info(f"Deleted label '{label_name}' from repository")
    except Exception as e:
        logger.warning(f"Failed to delete label '{label_name}' from repository: {e}")


def get_value(context: OperationContext, key: str, current_labels: list[Label]) -> OperationResult:
    """Get a single state value by key"""
    state = extract_state(current_labels, context.prefix, context.separator)

    if key not in state:
        return OperationResult(success=False, value=None)

    return OperationResult(success=True, value=state[key])


def get_all_values(context: OperationContext, current_labels: list[Label]) -> OperationResult:
    """Get all state values as a JSON object string"""
    state = extract_state(current_labels, context.prefix, context.separator)
    return OperationResult(success=True, state=serialize_state(state))


def set_value(context: OperationContext, key: str, value: str, current_labels: list[Label]) -> OperationResult:
    """Set a state value, replacing any existing label for the key"""
    new_name = format_label(key, canonicalize_value(value), context.prefix, context.separator)
    existing, keep = _split_labels(context, key, current_labels)

    context.service.replace_labels(context.issue_number, keep + [new_name])

    if existing is not None and context.delete_unused_labels:
        if existing == new_name:
            logger.debug(f"Label '{new_name}' unchanged, nothing to clean up")
        else:
            _cleanup_label(context, existing)

    return OperationResult(success=True)


def remove_key(context: OperationContext, key: str, current_labels: list[Label]) -> OperationResult:
    """Remove a state key; an absent key is reported as unsuccessful without any API call"""
    existing, keep = _split_labels(context, key, current_labels)

    if existing is None:
        return OperationResult(success=False)

    context.service.replace_labels(context.issue_number, keep)

    if context.delete_unused_labels:
        _cleanup_label(context, existing)

    return OperationResult(success=True)


def dispatch(
    operation: Operation,
    context: OperationContext,
    key: str | None,
    value: str | None,
    current_labels: list[Label]
) -> OperationResult:
    """Run one of the four operations against the given labels"""
    if operation is Operation.GET:
        return get_value(context, key, current_labels)
    if operation is Operation.GET_ALL:
        return get_all_values(context, current_labels)
    if operation is Operation.SET:
        return set_value(context, key, value, current_labels)
    if operation is Operation.REMOVE:
        return remove_key(context, key, current_labels)
    raise ValueError(f"Unsupported operation: {operation}")
