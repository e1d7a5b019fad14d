"""
Shared test fixtures.
"""

import json

import pytest

from dbmodel_codegen.core.config import load_config
from dbmodel_codegen.core.schema import Entity, Property, Schema
from dbmodel_codegen.languages.csharp import CSharpGenerator


ORDER_CONFIG = {
    "entities": [
        {
            "name": "Order",
            "tableName": "Orders",
            "properties": [
                {"name": "Id", "type": "int", "isPrimaryKey": True},
                {"name": "Total", "type": "decimal", "precision": 8, "scale": 2},
            ],
        }
    ]
}

ORDER_ENTITY_CS = """\
using System;
using System.ComponentModel.DataAnnotations;
using System.ComponentModel.DataAnnotations.Schema;

namespace GeneratedModels
{
    [Table("Orders")]
    public partial class Order
    {
        [Key]
        public int Id { get; set; }

        [Column(TypeName = "decimal(8, 2)")]
        public decimal Total { get; set; }

    }
}
"""

ORDER_CONTEXT_CS = """\
using Microsoft.EntityFrameworkCore;

namespace GeneratedModels
{
    public partial class GeneratedDbContext : DbContext
    {
        public GeneratedDbContext(DbContextOptions<GeneratedDbContext> options)
            : base(options)
        {
        }

        public DbSet<Order> Orders { get; set; }
    }
}
"""


@pytest.fixture
def order_config_text() -> str:
    return json.dumps(ORDER_CONFIG)


@pytest.fixture
def shop_schema() -> Schema:
    """Two entities exercising every constraint."""
    return Schema(
        entities=[
            Entity(
                name="Customer",
                table_name="Customers",
                properties=[
                    Property(name="Id", type="guid", is_primary_key=True),
                    Property(
                        name="Email",
                        type="string",
                        is_required=True,
                        max_length=255,
                    ),
                    Property(name="Nickname", type="string"),
                    Property(name="CreatedAt", type="DateTime"),
                ],
            ),
            Entity(
                name="Invoice",
                table_name="Invoices",
                properties=[
                    Property(name="Id", type="long", is_primary_key=True),
                    Property(name="Amount", type="decimal", precision=10, scale=2),
                    Property(name="Paid", type="bool", is_required=True),
                ],
            ),
        ]
    )


@pytest.fixture
def generator() -> CSharpGenerator:
    return CSharpGenerator(load_config("csharp"))


@pytest.fixture
def order_entity_cs() -> str:
    return ORDER_ENTITY_CS


@pytest.fixture
def order_context_cs() -> str:
    return ORDER_CONTEXT_CS
