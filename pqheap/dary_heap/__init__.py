from pqheap.dary_heap.dary_heap import DaryHeap, Node
