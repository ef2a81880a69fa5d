from avltree import AVLTree


def show(title, items, sink):
    sink("")
    sink(title)
    for key, value in items:
        sink("{} => {}".format(key, value))


def run(sink=print):
    tree = AVLTree()
    for key in [6, 2, 8, 1, 4, 3]:
        tree.insert(key, key)

    show("In-Order", tree.inorder(), sink)
    show("Pre-Order", tree.preorder(), sink)
    show("Post-Order", tree.postorder(), sink)
    show("Breadth-First", tree.breadth_first(), sink)

    sink("")
    sink("Height: {}".format(tree.height))
    sink("Balanced: {}".format(tree.is_balanced()))

    tree.insert(0, 0)
    sink(str(tree.search(0)))
    tree.delete(0)
    sink(str(tree.search(0)))
    tree.insert(0, 0)
    sink(str(tree.search(0)))

    tree.delete(6)
    sink(str(tree.search(6)))
    show("In-Order", tree.inorder(), sink)
    return tree


if __name__ == "__main__":
    run()
