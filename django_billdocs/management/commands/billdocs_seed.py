"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.core.management.base import BaseCommand

from django_billdocs.io.data_generator import BillingDataGenerator


class Command(BaseCommand):
    help = 'Populates the database with random clients, invoices and purchase orders.'

    def add_arguments(self, parser):
        parser.add_argument('--clients', type=int, default=5)
        parser.add_argument('--invoices', type=int, default=10)
        parser.add_argument('--purchase-orders', type=int, default=10)
        parser.add_argument('--seed', type=int, default=None)
        parser.add_argument('--currency', type=str, default='INR')

    def handle(self, *args, **options):
        generator = BillingDataGenerator(seed=options['seed'], currency=options['currency'])
        created = generator.populate(
            clients=options['clients'],
            invoices=options['invoices'],
            purchase_orders=options['purchase_orders']
        )
        for kind, models in created.items():
            self.stdout.write(self.style.SUCCESS(f'Created {len(models)} {kind.replace("_", " ")}.'))
