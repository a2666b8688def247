""" The direct-interpretation run-time: walk the tree, produce effects. """
