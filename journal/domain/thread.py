"""Comment thread algorithms.

Comments arrive from the store as a flat list. Everything here rebuilds and
walks the reply tree from that list without touching the store:

- ``build_thread``: split the list into roots and a parent -> children index
- ``count_replies``: number of transitive replies under a comment
- ``cascade_order``: delete order for a comment and its replies, leaves first
- ``reconcile``: filtered moderation/public view that never hides a reply
  whose parent was filtered out or no longer exists

Traversals are iterative and track visited ids, so a corrupt ``parent_id``
cycle terminates instead of recursing forever.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from journal.domain.model import Comment
from journal.domain.value import CommentId, CommentStatus, PostSlug

# Deepest depth that still nests its replies. Rendered trees are at most
# MAX_RENDER_DEPTH + 1 levels deep, whatever the chain length in the store.
MAX_RENDER_DEPTH = 32


@dataclass
class Thread:
    """Flat comment set partitioned into roots and direct-children buckets."""

    roots: list[Comment]
    children: dict[CommentId, list[Comment]]

    def children_of(self, comment_id: CommentId) -> list[Comment]:
        """Direct replies of a comment, in input order."""
        return self.children.get(comment_id, [])


@dataclass
class ThreadNode:
    """Node handed to the rendering layer.

    ``depth`` is 0 for roots and pseudo-roots and only drives indentation.
    """

    comment: Comment
    depth: int
    children: list["ThreadNode"] = field(default_factory=list)


def build_thread(comments: Iterable[Comment]) -> Thread:
    """Partition comments into roots and a parent -> children index.

    Single pass. Every comment lands exactly once, either in ``roots`` or in
    its parent's bucket, even when the parent is not in ``comments``.
    Bucket order is input order. Every comment id gets a bucket, so leaves
    map to an empty list.

    Args:
        comments: Flat comment records, usually ordered by creation time

    Returns:
        Thread with roots and children index
    """
    roots: list[Comment] = []
    children: dict[CommentId, list[Comment]] = defaultdict(list)

    for comment in comments:
        children.setdefault(comment.id, [])
        if comment.parent_id is None:
            roots.append(comment)
        else:
            children[comment.parent_id].append(comment)

    return Thread(roots=roots, children=dict(children))


def _as_thread(comments: Iterable[Comment] | Thread) -> Thread:
    if isinstance(comments, Thread):
        return comments
    return build_thread(comments)


def count_replies(comment_id: CommentId, comments: Iterable[Comment] | Thread) -> int:
    """Count every reply under a comment (children, grandchildren, ...).

    Args:
        comment_id: Comment whose replies are counted
        comments: Full flat comment set, or a prebuilt Thread

    Returns:
        Number of transitive descendants, 0 for a comment without replies
    """
    thread = _as_thread(comments)

    count = 0
    visited: set[CommentId] = {comment_id}
    stack = [comment_id]
    while stack:
        current = stack.pop()
        for child in thread.children_of(current):
            if child.id in visited:
                continue
            visited.add(child.id)
            count += 1
            stack.append(child.id)
    return count


def cascade_order(
    comment_id: CommentId, comments: Iterable[Comment] | Thread
) -> list[CommentId]:
    """Compute the order in which a comment and its replies must be deleted.

    Depth-first post-order: every reply comes before its parent and the
    target comment comes last. Siblings keep input order, so for
    ``1 -> [2 -> [4], 3]`` the result is ``[4, 2, 3, 1]``.

    Args:
        comment_id: Comment to delete
        comments: Full flat comment set, or a prebuilt Thread

    Returns:
        Comment ids in delete order
    """
    thread = _as_thread(comments)

    order: list[CommentId] = []
    visited: set[CommentId] = {comment_id}
    # Each frame: (comment id, iterator over its children)
    stack = [(comment_id, iter(thread.children_of(comment_id)))]
    while stack:
        current, pending = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            order.append(current)
            continue
        if child.id in visited:
            continue
        visited.add(child.id)
        stack.append((child.id, iter(thread.children_of(child.id))))
    return order


def reconcile(
    comments: list[Comment],
    status: CommentStatus = CommentStatus.ALL,
    post_slug: PostSlug | None = None,
) -> list[ThreadNode]:
    """Build the render tree for a filtered view of the comment set.

    Only comments passing both filters are rendered, and each of them is
    rendered exactly once:

    1. Filter by status and post.
    2. Index children over the *unfiltered* set so nesting is the true one.
    3. A filtered comment is top-level when it has no parent or its parent
       did not pass the filter (or is missing). Those are pseudo-roots at
       depth 0 and lose their original nesting.
    4. A node's children are its true children that passed the filter.
    5. Below ``MAX_RENDER_DEPTH`` nesting stops: the visible descendants of a
       node at that depth are listed flat under it, in thread order.

    Args:
        comments: Full flat comment set, in display order
        status: Moderation status filter
        post_slug: Optional post filter

    Returns:
        Root and pseudo-root nodes with nested visible children
    """
    visible = [
        comment
        for comment in comments
        if status.matches(comment.approved)
        and (post_slug is None or comment.post_slug == post_slug)
    ]
    visible_ids = {comment.id for comment in visible}
    thread = build_thread(comments)

    nodes: list[ThreadNode] = []
    placed: set[CommentId] = set()

    def visible_children(comment: Comment) -> list[Comment]:
        return [
            child
            for child in thread.children_of(comment.id)
            if child.id in visible_ids and child.id not in placed
        ]

    def flatten_below(node: ThreadNode) -> None:
        # Pre-order walk, every descendant one level under the capped node
        pending = list(reversed(visible_children(node.comment)))
        while pending:
            comment = pending.pop()
            if comment.id in placed:
                continue
            placed.add(comment.id)
            node.children.append(ThreadNode(comment=comment, depth=node.depth + 1))
            pending.extend(reversed(visible_children(comment)))

    def attach_subtree(root: Comment) -> None:
        top = ThreadNode(comment=root, depth=0)
        nodes.append(top)
        placed.add(root.id)
        stack = [top]
        while stack:
            node = stack.pop()
            if node.depth >= MAX_RENDER_DEPTH:
                flatten_below(node)
                continue
            for child in visible_children(node.comment):
                placed.add(child.id)
                child_node = ThreadNode(comment=child, depth=node.depth + 1)
                node.children.append(child_node)
                stack.append(child_node)

    for comment in visible:
        if comment.parent_id is None or comment.parent_id not in visible_ids:
            attach_subtree(comment)

    # Only reachable with a parent_id cycle: nothing in it is top-level.
    for comment in visible:
        if comment.id not in placed:
            attach_subtree(comment)

    return nodes


def iter_nodes(nodes: list[ThreadNode]) -> Iterable[ThreadNode]:
    """Yield every node of a rendered tree, parents before children."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
