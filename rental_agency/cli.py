"""
Command line front end.

Commands are chained so that one invocation works on one in-memory agency:

    $ rental-agency add-vehicle car GW-23 "Toyota Corolla" 50 yes \\
                    rent GW-23 22123273 5 return GW-23 list-transactions
"""

import logging

import click

from rental_agency.models.agency import RentalAgency
from rental_agency.seeds import run_demo
from rental_agency.services.customer_service import CustomerService
from rental_agency.services.rental_service import RentalService
from rental_agency.services.vehicle_service import VehicleService

pass_agency = click.make_pass_decorator(RentalAgency)


@click.group(chain=True)
@click.option("-v", "--verbose", is_flag=True, help="Log agency activity to stderr.")
@click.pass_context
def cli(ctx, verbose):
    """Toy vehicle rental agency."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = RentalAgency("cli")


@cli.command("add-vehicle")
@click.argument("vtype", metavar="TYPE")
@click.argument("vehicle_id")
@click.argument("model")
@click.argument("rate")
@click.argument("attr", metavar="VARIANT_ATTR")
@pass_agency
def add_vehicle(agency, vtype, vehicle_id, model, rate, attr):
    """Add a car (air conditioning yes/no), motorcycle (sidecar yes/no)
    or truck (load capacity)."""
    ok, msg, vehicle = VehicleService.admin_create_vehicle({
        "type": vtype,
        "vehicle_id": vehicle_id,
        "model": model,
        "rate": rate,
        "attr": attr,
    }, agency=agency)
    if not ok:
        raise click.ClickException(msg)
    click.echo(f"Vehicle added: {vehicle.vehicle_id} ({vehicle.model})")


@cli.command("add-customer")
@click.argument("customer_id")
@click.argument("name")
@pass_agency
def add_customer(agency, customer_id, name):
    ok, msg, customer = CustomerService.register(customer_id, name, agency=agency)
    if not ok:
        raise click.ClickException(msg)
    click.echo(f"Customer added: {customer.customer_id} ({customer.name})")


@cli.command("rent")
@click.argument("vehicle_id")
@click.argument("customer_id")
@click.argument("days")
@pass_agency
def rent(agency, vehicle_id, customer_id, days):
    """Rent VEHICLE_ID to CUSTOMER_ID for DAYS days."""
    ok, msg, _ = RentalService.rent(vehicle_id, customer_id, days, agency=agency)
    if not ok:
        raise click.ClickException(msg)
    click.echo(msg)


@cli.command("return")
@click.argument("vehicle_id")
@pass_agency
def return_vehicle(agency, vehicle_id):
    """Return a rented vehicle."""
    ok, msg, _ = RentalService.return_vehicle(vehicle_id, agency=agency)
    if not ok:
        raise click.ClickException(msg)
    click.echo(msg)


@cli.command("list-transactions")
@pass_agency
def list_transactions(agency):
    for line in RentalService.transaction_lines(agency):
        click.echo(line)


@cli.command("list-vehicles")
@pass_agency
def list_vehicles(agency):
    for v in VehicleService.all_vehicles(agency):
        click.echo(f"{v.vehicle_id} {v.vehicle_type} {v.model!r} rate={v.base_rate} {v.status}")


@cli.command("demo")
@pass_agency
def demo(agency):
    """Run the sample rent/return scenario."""
    run_demo(agency, echo=click.echo)


def main():
    cli(prog_name="rental-agency")


if __name__ == "__main__":
    main()
