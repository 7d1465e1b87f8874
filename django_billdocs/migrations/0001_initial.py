from decimal import Decimal
import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ClientModel',
            fields=[
                ('created', models.DateTimeField(auto_now_add=True)),
                ('updated', models.DateTimeField(auto_now=True, null=True, blank=True)),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=150, verbose_name='Client Name')),
                ('address', models.TextField(verbose_name='Address')),
                ('state_code', models.CharField(max_length=2, validators=[django.core.validators.RegexValidator(message='State code must be 2 digits.', regex='^\\d{2}$')], verbose_name='State Code')),
                ('gstin', models.CharField(max_length=15, unique=True, validators=[django.core.validators.RegexValidator(message='Not a valid GSTIN.', regex='^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$')], verbose_name='GSTIN')),
            ],
            options={
                'verbose_name': 'Client',
                'ordering': ['-created'],
                'abstract': False,
                'indexes': [
                    models.Index(fields=['created'], name='django_bill_created_9cd1db_idx'),
                    models.Index(fields=['name'], name='django_bill_name_d32023_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='DocumentSequenceModel',
            fields=[
                ('created', models.DateTimeField(auto_now_add=True)),
                ('updated', models.DateTimeField(auto_now=True, null=True, blank=True)),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('key', models.CharField(choices=[('invoice', 'Invoice'), ('po', 'Purchase Order')], max_length=10)),
                ('date', models.DateField(verbose_name='Sequence Date')),
                ('sequence', models.BigIntegerField(default=0, validators=[django.core.validators.MinValueValidator(limit_value=0)])),
            ],
            options={
                'verbose_name': 'Document Sequence',
                'abstract': False,
                'indexes': [
                    models.Index(fields=['key'], name='django_bill_key_561b12_idx'),
                    models.Index(fields=['key', 'date'], name='django_bill_key_d387a6_idx'),
                ],
                'unique_together': {('key', 'date')},
            },
        ),
        migrations.CreateModel(
            name='InvoiceModel',
            fields=[
                ('created', models.DateTimeField(auto_now_add=True)),
                ('updated', models.DateTimeField(auto_now=True, null=True, blank=True)),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('document_number', models.CharField(blank=True, editable=False, max_length=30, null=True, unique=True, verbose_name='Document Number')),
                ('date_issued', models.DateField(verbose_name='Issue Date')),
                ('date_due', models.DateField(verbose_name='Due Date')),
                ('date_reference', models.DateField(blank=True, null=True, verbose_name='Reference Date')),
                ('reference', models.CharField(blank=True, default='', max_length=100, verbose_name='Reference')),
                ('currency', models.CharField(default='USD', max_length=10, verbose_name='Currency')),
                ('amount_due', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Amount Due')),
                ('taxable_value_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total Taxable Value')),
                ('cgst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total CGST Amount')),
                ('sgst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total SGST Amount')),
                ('igst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total IGST Amount')),
                ('amount_in_words', models.TextField(verbose_name='Amount in Words')),
                ('with_signature', models.BooleanField(default=False, verbose_name='With Signature Block')),
                ('bill_to', models.JSONField(verbose_name='Bill To')),
                ('ship_to', models.JSONField(verbose_name='Ship To')),
                ('payment_mode', models.CharField(choices=[('bank-transfer', 'Bank Transfer'), ('credit-card', 'Credit Card'), ('debit-card', 'Debit Card'), ('upi', 'UPI'), ('cash', 'Cash'), ('cheque', 'Cheque')], default='bank-transfer', max_length=20, verbose_name='Payment Mode')),
            ],
            options={
                'verbose_name': 'Invoice',
                'verbose_name_plural': 'Invoices',
                'ordering': ['-created'],
                'abstract': False,
                'indexes': [
                    models.Index(fields=['created'], name='django_bill_created_fde79b_idx'),
                    models.Index(fields=['date_issued'], name='django_bill_date_is_71252d_idx'),
                    models.Index(fields=['date_due'], name='django_bill_date_du_f95bb7_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PurchaseOrderModel',
            fields=[
                ('created', models.DateTimeField(auto_now_add=True)),
                ('updated', models.DateTimeField(auto_now=True, null=True, blank=True)),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('document_number', models.CharField(blank=True, editable=False, max_length=30, null=True, unique=True, verbose_name='Document Number')),
                ('date_issued', models.DateField(verbose_name='Issue Date')),
                ('date_due', models.DateField(verbose_name='Due Date')),
                ('date_reference', models.DateField(blank=True, null=True, verbose_name='Reference Date')),
                ('reference', models.CharField(blank=True, default='', max_length=100, verbose_name='Reference')),
                ('currency', models.CharField(default='USD', max_length=10, verbose_name='Currency')),
                ('amount_due', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Amount Due')),
                ('taxable_value_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total Taxable Value')),
                ('cgst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total CGST Amount')),
                ('sgst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total SGST Amount')),
                ('igst_total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total IGST Amount')),
                ('amount_in_words', models.TextField(verbose_name='Amount in Words')),
                ('with_signature', models.BooleanField(default=False, verbose_name='With Signature Block')),
                ('vendor', models.JSONField(verbose_name='Vendor')),
                ('deliver_to', models.JSONField(verbose_name='Deliver To')),
                ('payment_terms', models.CharField(choices=[('net-30', 'Net 30 Days'), ('net-60', 'Net 60 Days'), ('net-90', 'Net 90 Days'), ('cod', 'Cash on Delivery'), ('advance', 'Advance'), ('immediate', 'Immediate')], default='net-30', max_length=10, verbose_name='Payment Terms')),
            ],
            options={
                'verbose_name': 'Purchase Order',
                'verbose_name_plural': 'Purchase Orders',
                'ordering': ['-created'],
                'abstract': False,
                'indexes': [
                    models.Index(fields=['created'], name='django_bill_created_c43e4b_idx'),
                    models.Index(fields=['date_issued'], name='django_bill_date_is_fe25da_idx'),
                    models.Index(fields=['date_due'], name='django_bill_date_du_de0c68_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InvoiceLineItemModel',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name='Position')),
                ('description', models.TextField(verbose_name='Description')),
                ('hsn_sac', models.CharField(blank=True, default='', max_length=20, verbose_name='HSN/SAC Code')),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('1'))], verbose_name='Quantity')),
                ('rate', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Rate')),
                ('taxable_value', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Taxable Value')),
                ('gst_rate', models.DecimalField(decimal_places=2, max_digits=6, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='GST Rate (%)')),
                ('gst_amount', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='GST Amount')),
                ('total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total')),
                ('invoice_model', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='django_billdocs.invoicemodel', verbose_name='Invoice')),
            ],
            options={
                'verbose_name': 'Invoice Line Item',
                'ordering': ['position'],
                'abstract': False,
                'unique_together': {('invoice_model', 'position')},
            },
        ),
        migrations.CreateModel(
            name='PurchaseOrderLineItemModel',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name='Position')),
                ('description', models.TextField(verbose_name='Description')),
                ('hsn_sac', models.CharField(blank=True, default='', max_length=20, verbose_name='HSN/SAC Code')),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('1'))], verbose_name='Quantity')),
                ('rate', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Rate')),
                ('taxable_value', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Taxable Value')),
                ('gst_rate', models.DecimalField(decimal_places=2, max_digits=6, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='GST Rate (%)')),
                ('gst_amount', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='GST Amount')),
                ('total', models.DecimalField(decimal_places=2, max_digits=20, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Total')),
                ('po_model', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='django_billdocs.purchaseordermodel', verbose_name='Purchase Order')),
            ],
            options={
                'verbose_name': 'Purchase Order Line Item',
                'ordering': ['position'],
                'abstract': False,
                'unique_together': {('po_model', 'position')},
            },
        ),
    ]
