from pqheap.dary_heap.dary_heap import DaryHeap, Node


def get_topk(heap: DaryHeap, k: int) -> list[Node]:
    """
    Function to get the K lightest nodes from a heap without polling them.

    Nodes come back in non-decreasing weight order; the order between nodes
    of equal weight follows their storage order in the heap.

    Parameters
    ----------
    heap : DaryHeap
        A DaryHeap object
    k : int
        The number of 'top-K' nodes to retrieve.

    Returns
    -------
    list[Node]
        The 'top-K' nodes.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    nodes = list(heap)
    nodes.sort(key=lambda node: node.weight)
    return nodes[:k]
