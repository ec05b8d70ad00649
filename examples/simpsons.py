"""
Simpsons - prototype objects in a few lines

Demonstrates the whole object model:
- A root prototype with attributes and a method
- Extending it (attribute values copied, methods shared)
- Referring to the prototype with prot()
- Adding a method after the fact, seen by existing descendants
- Chains of prototypes

Run it:
    python examples/simpsons.py
"""

from prototype_objects import ObjectModel


def build(model=None):
    """Build the family and return it as a dict of nodes"""
    model = model or ObjectModel(name='simpsons')

    person = model.create(
        first_name='Generic',
        last_name='Person',
        say_hi=lambda self: f"Hi, my name is {self.first_name()} {self.last_name()}",
    )

    homer = person.extend(first_name='Homer', last_name='Simpson')

    bart = homer.extend(
        first_name='Bart',
        father=lambda self: f"My father's name is {self.prot().first_name()}",
        add_numbers=lambda self, a, b: a + b,
    )

    return {'person': person, 'homer': homer, 'bart': bart}


def main():
    family = build()
    person, homer, bart = family['person'], family['homer'], family['bart']

    print(homer.say_hi())
    print(bart.say_hi())
    print(bart.father())
    print('2 + 2 =', bart.add_numbers(2, 2))
    print('homer can add_numbers:', homer.can('add_numbers'))

    # Methods added to a prototype reach existing descendants
    person.add_method('shout', lambda self: self.first_name().upper() + '!')
    print(bart.shout())

    # Chains of prototypes
    lisa = homer.extend(first_name='Lisa')
    maggie = lisa.extend()
    print(maggie.prot().prot().prot() is person)


if __name__ == '__main__':
    main()
