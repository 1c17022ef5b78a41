"""EduCMS API server: generic CRUD proxy in front of the hosted storage backend."""
