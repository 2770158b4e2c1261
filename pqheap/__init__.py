from pqheap.dary_heap.dary_heap import DaryHeap, Node
from pqheap.dary_heap.topk import get_topk
