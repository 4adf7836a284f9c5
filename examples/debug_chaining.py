from lzd import create_debugger, get_debugger


class Inventory:
    debug_id = 'inventory'

    def __init__(self):
        self.state = {'apples': 1, 'updated': 0}
        self.debug = create_debugger(self)

    def add(self, **items):
        self.debug.diff(self.state, merge={**items, 'updated': 1}, message='Stock', no_changes='Nothing to add')


if __name__ == '__main__':
    log = get_debugger('example').set_verbosity(1)
    log('hello world', {'answer': 42})
    log(1, 'shown at verbosity 1')
    log(2, 'hidden at verbosity 1')
    log.as_('other').warn('temporary prefix, as a warning')
    log('back to the original prefix')

    inventory = Inventory()
    inventory.add(apples=3, pears=2)
    inventory.add(apples=3)

    log.only('exclusive')
    log('not shown, only() disabled this debugger')
