from ringqueue.algorithms import (delete_duplicates, delete_middle, merge,
                                  prune_ascending, prune_descending, reverse,
                                  reverse_k, sort, swap_pairs)
from ringqueue.listhead import ListHead
from ringqueue.merge import add_queue, create_chain, destroy_chain, merge_k
from ringqueue.models import Element, QueueContext, release_element
from ringqueue.queue import (create, destroy, insert_head, insert_tail,
                             remove_head, remove_tail, size, values)
from ringqueue.settings import settings, update_settings
