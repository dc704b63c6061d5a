from models import RacketSpec


def make_spec(head_size=100, mains=16, crosses=19, stiffness=60, **kwargs):
    fields = dict(brand="Test", product="Frame", version="2024", variant="MP")
    fields.update(kwargs)
    return RacketSpec(head_size=head_size, mains=mains, crosses=crosses, stiffness=stiffness, **fields)
