"""
Migration inicial para o domínio de Clientes.

Cria as tabelas:
- enderecos: Cache de endereços por CEP
- clientes: Clientes com FK para o endereço
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: enderecos
        # =================================================================
        migrations.CreateModel(
            name='EnderecoModel',
            fields=[
                ('cep', models.CharField(
                    max_length=9,
                    primary_key=True,
                    serialize=False,
                    help_text='CEP no formato NNNNN-NNN'
                )),
                ('logradouro', models.CharField(max_length=255, blank=True, default='')),
                ('complemento', models.CharField(max_length=255, blank=True, default='')),
                ('bairro', models.CharField(max_length=255, blank=True, default='')),
                ('localidade', models.CharField(max_length=255, blank=True, default='', db_index=True)),
                ('uf', models.CharField(max_length=2, blank=True, default='', db_index=True)),
                ('ibge', models.CharField(max_length=20, blank=True, default='')),
                ('gia', models.CharField(max_length=20, blank=True, default='')),
                ('ddd', models.CharField(max_length=5, blank=True, default='')),
                ('siafi', models.CharField(max_length=20, blank=True, default='')),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    editable=False,
                    help_text='Data/hora em que o CEP foi cacheado'
                )),
            ],
            options={
                'db_table': 'enderecos',
                'verbose_name': 'Endereço',
                'verbose_name_plural': 'Endereços',
                'ordering': ['cep'],
            },
        ),

        # =================================================================
        # Tabela: clientes
        # =================================================================
        migrations.CreateModel(
            name='ClienteModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('nome', models.CharField(
                    max_length=255,
                    db_index=True,
                    help_text='Nome do cliente'
                )),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    editable=False,
                )),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('endereco', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='clientes',
                    to='clientes.enderecomodel',
                    help_text='Endereço resolvido pelo CEP'
                )),
            ],
            options={
                'db_table': 'clientes',
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'ordering': ['id'],
            },
        ),
    ]
