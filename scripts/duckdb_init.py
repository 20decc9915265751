import duckdb


def load_demo_data():
    with duckdb.connect("data/file.db") as con:
        con.sql("CREATE SCHEMA IF NOT EXISTS sales")
        con.sql("CREATE OR REPLACE TABLE sales.customers (business_name STRING, web_site STRING)")
        con.sql("CREATE OR REPLACE VIEW sales.customer_sites AS SELECT web_site FROM sales.customers")
        con.sql("SELECT table_schema, table_name, table_type FROM information_schema.tables").show()


if __name__ == "__main__":
    load_demo_data()
