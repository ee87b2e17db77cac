def display_name(customer) -> str:
    return customer.name.title()
